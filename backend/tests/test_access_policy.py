"""
Access policy tests.

Verifies:
- Every predicate grants exactly the documented roles
- Grants are independent allow-lists, not a hierarchy
- Unknown or malformed roles are denied without raising
"""

import pytest

from caffissimo.config.permissions import ALL_PERMISSIONS, ROLES
from caffissimo.models import Role
from caffissimo.services import access_policy

SA, BO, SV, CA = Role.SUPER_ADMIN, Role.BRANCH_OWNER, Role.SUPERVISOR, Role.CASHIER

EXPECTED_GRANTS = {
    "can_access_all_branches": {SA},
    "can_manage_users": {SA, BO},
    "can_manage_offers": {SA, BO},
    "can_manage_products": {SA, BO, SV},
    "can_manage_branch": {SA, BO, SV},
    "can_view_reports": {SA, BO},
    "can_cancel_orders": {SA, BO},
    "can_submit_fridge_report": {SA, BO, SV},
    "can_view_attendance": {SA, BO},
    "can_view_audit_logs": {SA, BO},
    "can_manage_settings": {SA},
    "can_create_branch": {SA},
    "can_access_admin": {SA, BO, SV},
    "can_compare_branches": {SA},
}


class TestPredicateTable:

    @pytest.mark.parametrize("predicate", sorted(EXPECTED_GRANTS))
    @pytest.mark.parametrize("role", list(Role))
    def test_grant_matches_table(self, predicate, role):
        fn = getattr(access_policy, predicate)
        assert fn(role) is (role in EXPECTED_GRANTS[predicate])

    @pytest.mark.parametrize("predicate", sorted(EXPECTED_GRANTS))
    def test_plain_string_role_behaves_like_enum(self, predicate):
        fn = getattr(access_policy, predicate)
        for role in Role:
            assert fn(role.value) == fn(role)

    def test_cashier_has_no_admin_surface(self):
        for predicate in EXPECTED_GRANTS:
            assert getattr(access_policy, predicate)(CA) is False
        assert access_policy.granted_permissions(CA) == []


class TestNoHierarchy:

    def test_supervisor_manages_products_but_cannot_view_reports(self):
        assert access_policy.can_manage_products(SV)
        assert not access_policy.can_view_reports(SV)

    def test_branch_owner_cannot_manage_settings(self):
        assert access_policy.can_view_reports(BO)
        assert not access_policy.can_manage_settings(BO)
        assert not access_policy.can_access_all_branches(BO)


class TestFailClosed:

    @pytest.mark.parametrize("role", ["manager", "SUPER_ADMIN", "", None, 42, object(), ["super_admin"]])
    def test_unknown_role_denied_everywhere(self, role):
        for predicate in EXPECTED_GRANTS:
            assert getattr(access_policy, predicate)(role) is False

    def test_unknown_key_denied(self):
        assert access_policy.has_permission(SA, "feature:launch_rockets") is False

    def test_unknown_role_has_no_permissions(self):
        assert access_policy.granted_permissions("manager") == []


class TestPermissionMatrix:

    def test_matrix_covers_every_role_and_key(self):
        matrix = access_policy.permission_matrix()
        assert set(matrix) == set(ROLES)
        for grants in matrix.values():
            assert set(grants) == set(ALL_PERMISSIONS)

    def test_matrix_agrees_with_predicates(self):
        matrix = access_policy.permission_matrix()
        assert matrix["super_admin"]["scope:all_branches"] is True
        assert matrix["supervisor"]["feature:manage_products"] is True
        assert matrix["supervisor"]["page:reports"] is False
        assert not any(matrix["cashier"].values())

    def test_granted_permissions_sorted(self):
        granted = access_policy.granted_permissions(SA)
        assert granted == sorted(ALL_PERMISSIONS)
