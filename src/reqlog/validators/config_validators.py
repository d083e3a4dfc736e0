from reqlog.formatting.compiler import compile_format


def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.lower()

def check_template(value: str | None) -> str | None:
    """
    Compile the template once so a malformed one fails while settings load.
    FormatError is a ValueError, which pydantic reports as a ValidationError.
    """
    if value is not None:
        compile_format(value)
    return value
