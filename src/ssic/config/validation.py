"""Configuration validation for startup checks.

Validates that the configured dataset and search limits are usable before
the record store is loaded.

Usage:
    from ssic.config.validation import validate_configuration

    # During startup
    for result in validate_configuration():
        logger.warning("configuration_issue", detail=str(result))
"""

from dataclasses import dataclass
from enum import Enum

from ssic.config.settings import Settings, get_settings
from ssic.core.logging import get_logger
from ssic.utils.exceptions import ConfigurationError

logger = get_logger("ssic.config")


class ValidationSeverity(str, Enum):
    """Severity of configuration validation issues."""

    ERROR = "error"  # Must be fixed, records cannot be loaded
    WARNING = "warning"  # Should be fixed, engine can start but may have issues


@dataclass
class ValidationResult:
    """Result of a configuration validation check."""

    field: str
    severity: ValidationSeverity
    message: str
    suggestion: str | None = None

    def __str__(self) -> str:
        prefix = "ERROR" if self.severity == ValidationSeverity.ERROR else "WARNING"
        result = f"[{prefix}] {self.field}: {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


def validate_configuration(settings: Settings | None = None) -> list[ValidationResult]:
    """Validate application configuration.

    Args:
        settings: Settings to validate (default: global settings)

    Returns:
        List of validation results (empty if all checks pass)
    """
    if settings is None:
        settings = get_settings()

    results: list[ValidationResult] = []
    results.extend(_validate_dataset(settings))
    results.extend(_validate_search(settings))
    results.extend(_validate_environment(settings))
    return results


def validate_or_raise(settings: Settings | None = None) -> None:
    """Validate configuration and raise if errors found.

    Args:
        settings: Settings to validate

    Raises:
        ConfigurationError: If any validation errors are found
    """
    results = validate_configuration(settings)
    errors = [r for r in results if r.severity == ValidationSeverity.ERROR]

    if errors:
        error_messages = "\n".join(str(e) for e in errors)
        raise ConfigurationError(f"Configuration validation failed:\n{error_messages}")

    for warning in results:
        logger.warning("configuration_warning", field=warning.field, detail=warning.message)


# =============================================================================
# Validators
# =============================================================================


def _validate_dataset(settings: Settings) -> list[ValidationResult]:
    """Validate the dataset location."""
    results: list[ValidationResult] = []
    path = settings.ssic_data_path

    if path is None:
        results.append(
            ValidationResult(
                field="SSIC_DATA_PATH",
                severity=ValidationSeverity.WARNING,
                message="No dataset configured; the record store will start empty",
                suggestion="Set SSIC_DATA_PATH to the generated records JSON file",
            )
        )
    elif not path.is_file():
        results.append(
            ValidationResult(
                field="SSIC_DATA_PATH",
                severity=ValidationSeverity.ERROR,
                message=f"Dataset file not found: {path}",
            )
        )
    elif path.suffix.lower() != ".json":
        results.append(
            ValidationResult(
                field="SSIC_DATA_PATH",
                severity=ValidationSeverity.WARNING,
                message=f"Dataset does not have a .json extension: {path.name}",
            )
        )

    return results


def _validate_search(settings: Settings) -> list[ValidationResult]:
    """Validate search limits."""
    results: list[ValidationResult] = []

    if settings.search_max_results > 100:
        results.append(
            ValidationResult(
                field="SEARCH_MAX_RESULTS",
                severity=ValidationSeverity.WARNING,
                message=f"Large result cap ({settings.search_max_results}) may flood selection lists",
                suggestion="Keep the cap at 15 unless the consumer paginates",
            )
        )

    return results


def _validate_environment(settings: Settings) -> list[ValidationResult]:
    """Validate environment-specific settings."""
    results: list[ValidationResult] = []

    if settings.ENVIRONMENT == "production" and settings.log_level == "DEBUG":
        results.append(
            ValidationResult(
                field="LOG_LEVEL",
                severity=ValidationSeverity.WARNING,
                message="DEBUG logging in production logs every search query",
                suggestion="Set LOG_LEVEL=INFO or higher in production",
            )
        )

    return results
