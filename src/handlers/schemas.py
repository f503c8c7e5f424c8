"""Pydantic models for request and response bodies of both functions."""

from __future__ import annotations

from decimal import Decimal
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from src.chain.exceptions import InvalidAmountError, TxBuilderError
from src.chain.units import SOL_DECIMALS, parse_amount, to_base_units

INVALID_AMOUNT_MESSAGE = "Invalid amount. Must be a positive number."


class InvalidRequestError(TxBuilderError):
    pass


class DonationRequest(BaseModel):
    """Body of the donation function. The destination is not caller-controlled."""

    model_config = ConfigDict(extra="ignore")

    from_address: StrictStr
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def _positive_amount(cls, v: object) -> Decimal:
        try:
            # reject amounts no transfer instruction can carry before any RPC call
            to_base_units(v, SOL_DECIMALS)
            return parse_amount(v)
        except InvalidAmountError as e:
            raise ValueError(str(e)) from e


class TransferRequest(DonationRequest):
    """Body of the token transfer function."""

    to_address: StrictStr


class TransactionResponse(BaseModel):
    transaction: str
    recent_blockhash: str = Field(serialization_alias="recentBlockhash")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


RequestT = TypeVar("RequestT", bound=DonationRequest)


def parse_request(model: type[RequestT], body: object) -> RequestT:
    """Validate a decoded JSON body against ``model``.

    Amount problems win over every other field error so callers always
    get the "Invalid amount" message for a bad amount.
    Raises InvalidAmountError or InvalidRequestError.
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Invalid request body. Expected a JSON object.")
    try:
        return model.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        for err in errors:
            if err.get("loc", ())[:1] == ("amount",):
                cause = err.get("ctx", {}).get("error")
                raise InvalidAmountError(str(cause) if cause else INVALID_AMOUNT_MESSAGE) from e
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ())) or "body"
        raise InvalidRequestError(f"Invalid request: {loc}: {first.get('msg', 'invalid')}") from e
