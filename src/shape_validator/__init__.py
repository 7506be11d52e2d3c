"""shape_validator — validate JSON-like values against declarative schemas."""

__all__ = [
    "__version__",
    "validate",
    "is_valid",
    "Validator",
    "ValidatorConfig",
    "compile_schema",
    "load_schema",
    "load_document",
    # Model
    "ErrorCode",
    "Kind",
    "LeafSchema",
    "AnyOfSchema",
    "OneOfSchema",
    "SchemaRef",
    "ValidationReport",
    "Violation",
    # Errors
    "ShapeValidatorError",
    "SchemaDefinitionError",
    "SchemaTooDeepError",
    "UnsupportedValueError",
    "DocumentLoadError",
]
__version__ = "0.1.0"

from shape_validator.compiler import compile_schema  # noqa: E402
from shape_validator.contracts.load import load_document, load_schema  # noqa: E402
from shape_validator.core.config import ValidatorConfig  # noqa: E402
from shape_validator.engine import Validator, is_valid, validate  # noqa: E402
from shape_validator.exceptions import (  # noqa: E402
    DocumentLoadError,
    SchemaDefinitionError,
    SchemaTooDeepError,
    ShapeValidatorError,
    UnsupportedValueError,
)
from shape_validator.model import ErrorCode, Kind  # noqa: E402
from shape_validator.model.report import ValidationReport, Violation  # noqa: E402
from shape_validator.model.schema import (  # noqa: E402
    AnyOfSchema,
    LeafSchema,
    OneOfSchema,
    SchemaRef,
)
