"""Tests for the error classifier rule table."""

import pytest

from rapi.models import Permission
from rapi.rest import (
    RULES,
    DecodeError,
    GenericAPIError,
    MissingPermission,
    MissingUserPermission,
    ServerErrorBody,
    TooMany,
    classify,
)
from rapi.rest.codec import DEFAULT_CODEC


def body(**fields):
    return ServerErrorBody(**fields)


class TestClassify:
    def test_too_many_substring(self):
        error = classify(body(type="TooManyServers", max=5))

        assert isinstance(error, TooMany)
        assert (error.type, error.max) == ("TooManyServers", 5)

    def test_group_too_large_exact_match(self):
        error = classify(body(type="GroupTooLarge", max=50))

        assert isinstance(error, TooMany)
        assert (error.type, error.max) == ("GroupTooLarge", 50)

    def test_group_too_large_is_exact_only(self):
        error = classify(body(type="GroupTooLargeForReal"))

        assert isinstance(error, GenericAPIError)

    def test_missing_permission(self):
        error = classify(body(type="MissingPermission", permission="SendMessage"))

        assert isinstance(error, MissingPermission)
        assert error.permission is Permission.SEND_MESSAGE

    def test_missing_user_permission(self):
        error = classify(body(type="MissingUserPermission", permission="SendMessage"))

        assert isinstance(error, MissingUserPermission)
        assert error.permission is Permission.SEND_MESSAGE

    def test_generic(self):
        error = classify(body(type="SomethingElse"), 418)

        assert isinstance(error, GenericAPIError)
        assert error.type == "SomethingElse"
        assert error.status == 418

    def test_substring_rule_wins_over_exact_rules(self):
        error = classify(
            body(type="MissingPermissionTooManyTimes", max=3, permission="SendMessage")
        )

        assert isinstance(error, TooMany)
        assert error.type == "MissingPermissionTooManyTimes"

    @pytest.mark.parametrize(
        "fields, missing",
        [
            ({"type": "TooManyEmbeds"}, "max"),
            ({"type": "GroupTooLarge"}, "max"),
            ({"type": "MissingPermission"}, "permission"),
            ({"type": "MissingUserPermission"}, "permission"),
        ],
    )
    def test_required_field_missing_is_decode_error(self, fields, missing):
        with pytest.raises(DecodeError) as exc_info:
            classify(body(**fields))

        assert exc_info.value.path == (missing,)
        assert exc_info.value.kind == "missing"

    def test_max_of_zero_is_kept(self):
        error = classify(body(type="TooManyPendingFriendRequests", max=0))

        assert isinstance(error, TooMany)
        assert error.max == 0

    def test_status_is_carried(self):
        assert classify(body(type="TooManyServers", max=1), 400).status == 400


class TestRules:
    def test_last_rule_is_catch_all(self):
        matches, _ = RULES[-1]
        assert matches(body(type="anything"))

    def test_exactly_one_variant_per_body(self):
        for tag in ["TooManyX", "GroupTooLarge", "MissingPermission", "MissingUserPermission", "X"]:
            fields = {"type": tag, "max": 1, "permission": "React"}
            assert isinstance(
                classify(body(**fields)),
                (TooMany, MissingPermission, MissingUserPermission, GenericAPIError),
            )


class TestServerErrorBody:
    def test_decodes_from_wire(self):
        decoded = DEFAULT_CODEC.decode(ServerErrorBody, b'{"type": "TooManyServers", "max": 5}')

        assert decoded == ServerErrorBody(type="TooManyServers", max=5)

    def test_extra_fields_are_ignored(self):
        decoded = DEFAULT_CODEC.decode(
            ServerErrorBody, b'{"type": "NotFound", "location": "src/x.rs:1"}'
        )

        assert decoded.type == "NotFound"

    def test_negative_max_is_rejected(self):
        with pytest.raises(DecodeError):
            DEFAULT_CODEC.decode(ServerErrorBody, b'{"type": "TooManyServers", "max": -1}')

    def test_missing_type_is_rejected(self):
        with pytest.raises(DecodeError) as exc_info:
            DEFAULT_CODEC.decode(ServerErrorBody, b"{}")

        assert exc_info.value.path == ("type",)
