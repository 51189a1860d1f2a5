"""
Permission registry: single source of truth for all permission keys, labels,
categories, and the per-role grant table.

Grants are a flat allow-list per role. There is no role hierarchy: a key is
granted to a role only if it is listed under that role below.
"""

ALL_PERMISSIONS = {
    # Scope
    "scope:all_branches":   {"label": "Access All Branches", "category": "scope"},

    # Pages
    "page:admin":           {"label": "Admin Area",          "category": "pages"},
    "page:reports":         {"label": "Reports Page",        "category": "pages"},
    "page:attendance":      {"label": "POS Login Report",    "category": "pages"},
    "page:audit_logs":      {"label": "Audit Logs Page",     "category": "pages"},

    # Reports
    "report:branch_comparison": {"label": "Branch Comparison", "category": "reports"},

    # Features
    "feature:manage_users":         {"label": "Manage Users",          "category": "features"},
    "feature:manage_offers":        {"label": "Manage Offers",         "category": "features"},
    "feature:manage_products":      {"label": "Manage Products",       "category": "features"},
    "feature:manage_branch":        {"label": "Manage Branch",         "category": "features"},
    "feature:create_branch":        {"label": "Create Branch",         "category": "features"},
    "feature:cancel_orders":        {"label": "Cancel Orders",         "category": "features"},
    "feature:submit_fridge_report": {"label": "Submit Fridge Report",  "category": "features"},
    "feature:manage_settings":      {"label": "Manage Settings",       "category": "features"},
}

ROLES = ["super_admin", "branch_owner", "supervisor", "cashier"]

# role -> set of granted permission keys
ROLE_PERMISSIONS = {
    "super_admin": {
        "scope:all_branches",
        "page:admin", "page:reports", "page:attendance", "page:audit_logs",
        "report:branch_comparison",
        "feature:manage_users", "feature:manage_offers", "feature:manage_products",
        "feature:manage_branch", "feature:create_branch", "feature:cancel_orders",
        "feature:submit_fridge_report", "feature:manage_settings",
    },
    "branch_owner": {
        "page:admin", "page:reports", "page:attendance", "page:audit_logs",
        "feature:manage_users", "feature:manage_offers", "feature:manage_products",
        "feature:manage_branch", "feature:cancel_orders",
        "feature:submit_fridge_report",
    },
    "supervisor": {
        "page:admin",
        "feature:manage_products", "feature:manage_branch",
        "feature:submit_fridge_report",
    },
    # Cashiers have no admin-surface access at all.
    "cashier": set(),
}
