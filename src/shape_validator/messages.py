"""Default English messages for error codes.

Codes are the contract; messages are a convenience for humans and may be
replaced by callers.  Bound and enum messages vary with the kind of the
value that failed the check.
"""

from __future__ import annotations

from shape_validator.model import ErrorCode, Kind

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_NULLABLE: "Value is null, but the schema is not nullable",
    ErrorCode.UNKNOWN_TYPE: "Unknown type",
    ErrorCode.WRONG_TYPE: "Type is incorrect",
    ErrorCode.BELOW_MINIMUM: "Value is below the minimum",
    ErrorCode.ABOVE_MAXIMUM: "Value is above the maximum",
    ErrorCode.PATTERN_MISMATCH: "String does not match pattern",
    ErrorCode.FORMAT_MISMATCH: "Format of string is not valid",
    ErrorCode.NOT_IN_ENUM: "The enum does not allow this value",
    ErrorCode.MISSING_CONTAINS: "Array must contain a value, but does not",
    ErrorCode.DUPLICATE_ITEMS: "Elements of array are not unique",
    ErrorCode.MISSING_REQUIRED_PROPERTY: "Property is required, but missing",
    ErrorCode.DISALLOWED_ADDITIONAL_PROPERTY: "Object cannot have additional properties",
    ErrorCode.NO_VALID_ALTERNATIVE: "No schema alternative is valid",
    ErrorCode.MULTIPLE_VALID_ALTERNATIVES: "More than one schema alternative is valid",
}

_KIND_MESSAGES: dict[tuple[ErrorCode, Kind], str] = {
    (ErrorCode.BELOW_MINIMUM, Kind.NUMBER): "Value is less than the minimum",
    (ErrorCode.BELOW_MINIMUM, Kind.STRING): "String is too short",
    (ErrorCode.BELOW_MINIMUM, Kind.ARRAY): "Items count is less than the minimum",
    (ErrorCode.BELOW_MINIMUM, Kind.OBJECT): "Too few properties in object",
    (ErrorCode.ABOVE_MAXIMUM, Kind.NUMBER): "Value is greater than the maximum",
    (ErrorCode.ABOVE_MAXIMUM, Kind.STRING): "String is too long",
    (ErrorCode.ABOVE_MAXIMUM, Kind.ARRAY): "Items count is more than the maximum",
    (ErrorCode.ABOVE_MAXIMUM, Kind.OBJECT): "Too many properties in object",
    (ErrorCode.NOT_IN_ENUM, Kind.ARRAY): "The enum does not allow this array value",
}


def message_for(code: ErrorCode, kind: Kind | None = None) -> str:
    """Return the default message for *code*, specialised for *kind*."""
    if kind is not None:
        specific = _KIND_MESSAGES.get((code, kind))
        if specific is not None:
            return specific
    return _MESSAGES[code]


def catalog() -> list[dict[str, str]]:
    """Every code with its generic message, in enum order."""
    return [{"code": code.value, "message": _MESSAGES[code]} for code in ErrorCode]
