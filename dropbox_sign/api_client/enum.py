from dropbox_sign.base.components import BaseEnum


class ErrorNameEnum(BaseEnum):
    """
    Known values of `error.error_name`
    https://developers.hellosign.com/api/reference/overview/#errors-and-warnings
    """

    bad_request = "bad_request"
    unauthorized = "unauthorized"
    payment_required = "payment_required"
    forbidden = "forbidden"
    not_found = "not_found"
    conflict = "conflict"
    deleted = "deleted"
    exceeded_rate = "exceeded_rate"
    maintenance = "maintenance"
    unknown = "unknown"
