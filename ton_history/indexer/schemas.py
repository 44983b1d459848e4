"""
Typed response schemas for the TON HTTP API v3 endpoints this adapter reads.

Validated at the transport boundary so shape mismatches fail fast with
ResponseSchemaError instead of surfacing as KeyError deep in parsing.
Unknown fields are ignored; numeric strings (lt, total_fees, value) are
accepted and coerced.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, Field, RootModel, ValidationError, field_validator

from ton_history.core.exceptions import ResponseSchemaError

ModelT = TypeVar("ModelT", bound=BaseModel)


class MessageContent(BaseModel):
    hash: str | None = None
    body: str | None = Field(None, description="Base64 BoC of the message body")


class RawMessage(BaseModel):
    """One inbound or outbound message of a transaction."""

    hash: str | None = None
    source: str | None = Field(None, description="Raw source address; null for external inbound")
    destination: str | None = Field(None, description="Raw destination address; null for external outbound")
    value: int | None = Field(None, description="Nanotons carried by the message")
    message_content: MessageContent | None = None


class ComputePhase(BaseModel):
    skipped: bool | None = None
    exit_code: int | None = None


class TransactionDescription(BaseModel):
    compute_ph: ComputePhase | None = None


class RawTransaction(BaseModel):
    """One ledger event as listed by /transactions."""

    account: str | None = None
    hash: str
    lt: str
    now: int = Field(..., description="Unix time of the block, seconds")
    total_fees: int = 0
    description: TransactionDescription = Field(default_factory=TransactionDescription)
    in_msg: RawMessage | None = None
    out_msgs: list[RawMessage] = Field(default_factory=list)

    @field_validator("lt", mode="before")
    @classmethod
    def _lt_as_str(cls, v: Any) -> Any:
        # lt is a 64-bit logical time; v3 sends it as a string but older
        # deployments send a JSON number.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def exit_code(self) -> int | None:
        compute = self.description.compute_ph
        return compute.exit_code if compute is not None else None


class AddressBookEntry(BaseModel):
    user_friendly: str
    domain: str | None = None


class TransactionsResponse(BaseModel):
    transactions: list[RawTransaction]
    address_book: dict[str, AddressBookEntry] = Field(default_factory=dict)


class AddressBookResponse(RootModel[dict[str, AddressBookEntry]]):
    """/addressBook response: raw address -> entry."""

    def to_mapping(self) -> dict[str, str]:
        return {address: entry.user_friendly for address, entry in self.root.items()}


def validate_response(model: type[ModelT], data: Any, *, path: str) -> ModelT:
    """Validate decoded JSON against model; raise ResponseSchemaError on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ResponseSchemaError(
            f"Unexpected response shape from {path}: {e.error_count()} validation error(s)",
            path=path,
        ) from e
