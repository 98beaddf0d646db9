"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates simulation parameters before a run starts."""

    @staticmethod
    def validate_market_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price process parameters."""
        errors = []

        if "initial_price" in params:
            value = params["initial_price"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="initial_price",
                    message="Must be a positive number",
                    value=value
                ))

        if "drift" in params:
            value = params["drift"]
            if not _is_number(value):
                errors.append(ValidationError(
                    field="drift",
                    message="Must be a number",
                    value=value
                ))

        if "volatility" in params:
            value = params["volatility"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="volatility",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "time_step" in params:
            value = params["time_step"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="time_step",
                    message="Must be a positive number",
                    value=value
                ))

        if "total_ticks" in params:
            value = params["total_ticks"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="total_ticks",
                    message="Must be an integer of at least 1",
                    value=value
                ))

        if "seed" in params:
            value = params["seed"]
            if value is not None and (not _is_int(value) or value < 0):
                errors.append(ValidationError(
                    field="seed",
                    message="Must be a non-negative integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rolling window sizes."""
        errors = []

        for name in ("short_window", "long_window", "volatility_window"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_threshold_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility thresholds."""
        errors = []

        for name in ("volatility_high", "volatility_low",
                     "strangle_volatility_high", "strangle_volatility_low"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_trade_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trade lifecycle parameters."""
        errors = []

        if "hold_period" in params:
            value = params["hold_period"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="hold_period",
                    message="Must be an integer of at least 1",
                    value=value
                ))

        if "strike_offset" in params:
            value = params["strike_offset"]
            if not _is_number(value) or value <= 0 or value >= 1:
                errors.append(ValidationError(
                    field="strike_offset",
                    message="Must be a number strictly between 0 and 1",
                    value=value
                ))

        if "volume" in params:
            value = params["volume"]
            if not _is_int(value):
                errors.append(ValidationError(
                    field="volume",
                    message="Must be an integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "market" in config:
            errors.extend(ConfigValidator.validate_market_params(config["market"]))

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "thresholds" in config:
            errors.extend(ConfigValidator.validate_threshold_params(config["thresholds"]))

        if "trading" in config:
            errors.extend(ConfigValidator.validate_trade_params(config["trading"]))

        return errors
