import enum


class ExtendedEnum(enum.Enum):
    @classmethod
    def get_values(cls):
        return [enum_item.value for enum_item in cls]


class BaseEnum(str, ExtendedEnum):  # noqa: WPS600
    """
    BaseEnum class for all enums
    """
