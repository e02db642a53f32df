"""Opaque page token encoding for pagestate."""

import base64
import binascii
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_serializer, field_validator

from ..errors.pagination import InvalidToken


def _b64encode(raw: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(text: str) -> bytes:
    """Strict URL-safe base64 decoding that tolerates missing padding."""
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


class TokenEnvelope(BaseModel):
    """Decoded contents of a page token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cursor: bytes = Field(default=b"", alias="state", description="Store page state to resume from")
    previous: Optional[str] = Field(
        default=None,
        alias="prev",
        description="Token that fetched the earlier page; None when there is no earlier page"
    )

    @field_validator("cursor", mode="before")
    @classmethod
    def decode_state(cls, value, info: ValidationInfo):
        """Page state travels as base64 text inside the JSON payload."""
        if value is None:
            return b""
        if info.mode == "json":
            if not isinstance(value, str):
                raise ValueError("state must be a base64 string")
            try:
                return _b64decode(value)
            except (binascii.Error, ValueError) as e:
                raise ValueError(f"state is not valid base64: {e}")
        return value

    @field_serializer("cursor", when_used="json")
    def encode_state(self, value: bytes) -> str:
        return _b64encode(value)

    @property
    def is_empty(self) -> bool:
        """True for the start-of-results envelope."""
        return not self.cursor and not self.previous


def encode_token(cursor: Optional[bytes], previous: Optional[str] = None) -> str:
    """Encode a page token.

    Args:
        cursor: Page state reported by the store, empty for the start
        previous: Token that fetched the earlier page, or None

    Returns:
        URL-safe token string, empty when there is nothing to encode
    """
    envelope = TokenEnvelope(cursor=cursor or b"", previous=previous)
    if envelope.is_empty:
        return ""

    payload = envelope.model_dump_json(by_alias=True, exclude_defaults=True)
    return _b64encode(payload.encode("utf-8"))


def decode_token(token: str) -> TokenEnvelope:
    """Decode a page token.

    Args:
        token: Token produced by encode_token, or empty for the start

    Returns:
        Decoded envelope

    Raises:
        InvalidToken: If the token is not valid base64 or not a well-formed envelope
    """
    if not token:
        return TokenEnvelope()

    try:
        raw = _b64decode(token)
    except (binascii.Error, ValueError) as e:
        raise InvalidToken(token, f"not valid base64: {e}")

    try:
        return TokenEnvelope.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidToken(token, f"malformed envelope: {e.error_count()} error(s)")
