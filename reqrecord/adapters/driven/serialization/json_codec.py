"""JSON codec for request records, validated with pydantic."""

from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from reqrecord.ports.codec import RequestDecodeError, RequestEncodeError
from reqrecord.ports.request import Header, RequestRecord

__all__ = ["HeaderModel", "JsonCodec", "RequestRecordModel"]

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class HeaderModel(BaseModel):
    """Wire shape of one header: {"key": ..., "value": ...}."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: NonEmptyStr
    value: StrictStr


class RequestRecordModel(BaseModel):
    """Wire shape of one request record.

    Headers are a JSON array, never an object, so that order and duplicate
    keys survive. Scalars are strict: "1" is not an id and null is not a body,
    and url and header keys must be non-empty.
    The method is left untyped here and parsed by RequestRecord itself, so a
    bad method surfaces as InvalidMethod rather than a schema error.
    """

    model_config = ConfigDict(extra="forbid")

    id: StrictInt
    method: Any
    url: NonEmptyStr
    headers: list[HeaderModel]
    body: StrictStr

    @classmethod
    def from_record(cls, record: RequestRecord) -> "RequestRecordModel":
        return cls(
            id=record.id,
            method=record.method.value,
            url=record.url,
            headers=[HeaderModel(key=h.key, value=h.value) for h in record.headers],
            body=record.body,
        )

    def to_record(self) -> RequestRecord:
        """Build the record; raises InvalidMethod for an unsupported method."""
        return RequestRecord(
            id=self.id,
            method=self.method,
            url=self.url,
            headers=[Header(key=h.key, value=h.value) for h in self.headers],
            body=self.body,
        )


_records_adapter = TypeAdapter(list[RequestRecordModel])


class JsonCodec:
    """Encode and decode request records as JSON.

    Implements RequestCodecPort, plus list and dict variants used by
    storage collaborators.
    """

    def __init__(self, indent: int | None = None) -> None:
        """Initialize codec.

        Args:
            indent: Indentation for encoded output; compact when None.
        """
        self.indent = indent

    def encode(self, record: RequestRecord, /) -> str:
        return self._to_model(record).model_dump_json(indent=self.indent)

    def decode(self, text: str | bytes, /) -> RequestRecord:
        """Decode one JSON object into a record.

        Raises:
            RequestDecodeError: If JSON is invalid or does not match the schema.
            InvalidMethod: If the method is not supported.
        """
        try:
            model = RequestRecordModel.model_validate_json(text)
        except ValidationError as e:
            raise RequestDecodeError(f"Invalid request record JSON: {e}") from e
        return model.to_record()

    def encode_many(self, records: Iterable[RequestRecord]) -> str:
        models = [self._to_model(record) for record in records]
        return _records_adapter.dump_json(models, indent=self.indent).decode("utf-8")

    def decode_many(self, text: str | bytes) -> list[RequestRecord]:
        """Decode a JSON array of records, keeping array order.

        Raises:
            RequestDecodeError: If JSON is invalid, not an array, or an item
                does not match the schema.
            InvalidMethod: If any method is not supported.
        """
        try:
            models = _records_adapter.validate_json(text)
        except ValidationError as e:
            raise RequestDecodeError(f"Invalid request record list JSON: {e}") from e
        return [model.to_record() for model in models]

    def to_dict(self, record: RequestRecord) -> dict[str, Any]:
        return self._to_model(record).model_dump()

    def from_dict(self, data: dict[str, Any]) -> RequestRecord:
        """Rebuild a record from the mapping produced by to_dict().

        Raises:
            RequestDecodeError: If data does not match the schema.
            InvalidMethod: If the method is not supported.
        """
        try:
            model = RequestRecordModel.model_validate(data)
        except ValidationError as e:
            raise RequestDecodeError(f"Invalid request record data: {e}") from e
        return model.to_record()

    @staticmethod
    def _to_model(record: RequestRecord) -> RequestRecordModel:
        try:
            return RequestRecordModel.from_record(record)
        except ValidationError as e:
            raise RequestEncodeError(f"Cannot encode request #{record.id}: {e}") from e
