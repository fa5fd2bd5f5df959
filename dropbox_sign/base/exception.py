class BaseDropboxSignException(Exception):
    message: str

    # We mark exception as expected when it describes a normal outcome the caller should handle
    # (e.g. the provider rejected a request), so we don't need to trigger alerts.
    # Transport failures are not expected and are logged as errors.
    is_expected: bool = True

    def __init__(
        self,
        *,
        message: str | None = None,
        addition_message: str | None = None,
    ):
        if message:
            self.message = message

        self.addition_message = addition_message

        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        return f"{self.message} {self.addition_message}" if self.addition_message else self.message

    def __str__(self):
        class_name = self.__class__.__name__
        return f"{class_name}(message={self.full_message!r})"
