"""Error-code registry and message catalog contract."""

from __future__ import annotations

from shape_validator import codes
from shape_validator.messages import catalog, message_for
from shape_validator.model import ErrorCode, Kind
from shape_validator.predicates import PREDICATE_CHAIN


class TestRegistry:
    def test_all_codes_match_enum(self) -> None:
        assert codes.ALL_ERROR_CODES == sorted(c.value for c in ErrorCode)
        assert len(codes.ALL_ERROR_CODES) == 14

    def test_chain_codes_follow_predicate_chain(self) -> None:
        assert list(codes.CHAIN_ERROR_CODES) == [rule.code.value for rule in PREDICATE_CHAIN]

    def test_wrong_type_is_the_only_shared_code(self) -> None:
        assert codes.SHARED_ERROR_CODES == [codes.WRONG_TYPE]
        assert codes.CHAIN_ERROR_CODES.count(codes.WRONG_TYPE) == 3

    def test_composition_codes(self) -> None:
        assert codes.COMPOSITION_ERROR_CODES == [
            "multiple_valid_alternatives",
            "no_valid_alternative",
        ]

    def test_invariants_hold(self) -> None:
        # Runs at import as well; calling it again must not raise.
        codes._assert_code_registry_invariants()


class TestMessages:
    def test_every_code_has_a_message(self) -> None:
        for code in ErrorCode:
            assert message_for(code)

    def test_catalog_is_in_enum_order(self) -> None:
        entries = catalog()
        assert [e["code"] for e in entries] == [c.value for c in ErrorCode]
        assert all(set(e) == {"code", "message"} for e in entries)

    def test_bound_messages_by_kind(self) -> None:
        assert message_for(ErrorCode.BELOW_MINIMUM, Kind.STRING) == "String is too short"
        assert message_for(ErrorCode.BELOW_MINIMUM, Kind.OBJECT) == "Too few properties in object"
        assert message_for(ErrorCode.ABOVE_MAXIMUM, Kind.ARRAY) == "Items count is more than the maximum"

    def test_kind_without_variant_uses_generic(self) -> None:
        assert message_for(ErrorCode.NOT_IN_ENUM, Kind.STRING) == message_for(ErrorCode.NOT_IN_ENUM)
        assert message_for(ErrorCode.NOT_IN_ENUM, Kind.ARRAY) != message_for(ErrorCode.NOT_IN_ENUM)
