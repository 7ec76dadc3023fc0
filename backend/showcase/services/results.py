import enum


class Access(str, enum.Enum):
    """Outcome of a mutation that is restricted to the row's author"""
    OK = "ok"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
