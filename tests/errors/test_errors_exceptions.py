import unittest

from gdrivefs.errors.exceptions import (
    AmbiguousPathError,
    ApiError,
    AuthError,
    ConflictError,
    DirectoryNotEmptyError,
    GDriveFsError,
    HttpErrorInfo,
    InvalidArgumentError,
    MissingIdentityError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    ResolutionError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveFsError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_domain_errors_share_base(self) -> None:
        for cls in (AmbiguousPathError, MissingIdentityError, ResolutionError):
            self.assertTrue(issubclass(cls, GDriveFsError))

    def test_directory_not_empty_is_an_os_error(self) -> None:
        err = DirectoryNotEmptyError("Directory is not empty", details={"path": "A"})
        self.assertIsInstance(err, OSError)
        self.assertIsInstance(err, GDriveFsError)
        self.assertEqual(str(err), "Directory is not empty")
        self.assertEqual(err.details["path"], "A")

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=412, message="precondition"))
        self.assertIsInstance(err, ConflictError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_status_table(self) -> None:
        expected = {
            400: InvalidArgumentError,
            401: AuthError,
            403: PermissionError,
            404: NotFoundError,
            409: ConflictError,
            412: ConflictError,
            418: ApiError,
            429: RateLimitError,
            500: ApiError,
        }
        for status, cls in expected.items():
            err = map_http_error(HttpErrorInfo(status_code=status))
            self.assertIs(type(err), cls, status)
            self.assertEqual(err.details["status_code"], status)

    def test_map_http_error_quota_reason_is_case_insensitive(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=403, reason="DailyLimitExceeded"))
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(HttpErrorInfo(status_code=404, reason="quotaExceeded"))
        self.assertIsInstance(err, NotFoundError)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="storageQuotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientFilePermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_keeps_status_and_message(self) -> None:
        cause = RuntimeError("http")
        err = map_http_error(
            HttpErrorInfo(status_code=503, reason="backendError", message="unavail"),
            cause=cause,
        )
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "unavail")
        self.assertEqual(err.details["status_code"], 503)
        self.assertEqual(err.details["reason"], "backendError")
        self.assertIs(err.cause, cause)

    def test_map_http_error_default_message(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=418))
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "HTTP error 418")


if __name__ == "__main__":
    unittest.main()
