import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_binding(name: str, value: float) -> str:
    return f"{name} = {value}"


def format_error(message: str) -> str:
    return f"Error: {message}"
