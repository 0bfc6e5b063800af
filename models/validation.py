# models/validation.py

from utils.datetime_utils import is_valid_date_str

class ValidationError(Exception):
    """Invalid input data"""
    pass

def validate_text(text: str, min_length: int = 1, max_length: int = 1000, field_name: str = "text") -> str:
    """Validate and strip a text field"""
    if not isinstance(text, str):
        raise ValidationError(f"{field_name} must be a string")

    text = text.strip()
    if len(text) < min_length:
        raise ValidationError(f"{field_name} must contain at least {min_length} characters")

    if len(text) > max_length:
        raise ValidationError(f"{field_name} must contain at most {max_length} characters")

    return text

def validate_enum_value(value, enum_class: type, field_name: str = "value"):
    """Coerce a raw value or member into an enum member"""
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        valid_values = [e.value for e in enum_class]
        raise ValidationError(f"{field_name} must be one of: {valid_values}")

def validate_date(date_str: str, field_name: str = "date") -> str:
    if not is_valid_date_str(date_str):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {date_str!r}")
    return date_str
