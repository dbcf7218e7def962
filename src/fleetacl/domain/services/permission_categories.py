"""Permission categories offered to each company type's role editors."""

from collections.abc import Iterable

from fleetacl.domain.value_objects import CompanyType, PermissionKey

PermissionCategories = dict[str, list[PermissionKey]]

_P = PermissionKey

_MINE: PermissionCategories = {
    "Asset Management": [_P.ASSETS_VIEW, _P.ASSETS_ADD, _P.ASSETS_EDIT, _P.ASSETS_DELETE],
    "Order Management": [
        _P.ORDERS_VIEW,
        _P.ORDERS_CREATE,
        _P.ORDERS_ALLOCATE,
        _P.ORDERS_CANCEL,
        _P.ORDERS_VIEW_ALL,
        _P.ORDERS_EDIT_COMPLETED,
    ],
    "Pre-Booking Management": [
        _P.PRE_BOOKING_VIEW,
        _P.PRE_BOOKING_CREATE,
        _P.PRE_BOOKING_EDIT,
        _P.PRE_BOOKING_BYPASS,
    ],
    "Operational Flow": [
        _P.SECURITY_IN,
        _P.SECURITY_OUT,
        _P.WEIGHBRIDGE_TARE,
        _P.WEIGHBRIDGE_GROSS,
        _P.WEIGHBRIDGE_CALIBRATE,
        _P.WEIGHBRIDGE_OVERRIDE,
    ],
    "Administrative": [
        _P.ADMIN_USERS,
        _P.ADMIN_USERS_MANAGE_GLOBAL_ADMINS,
        _P.ADMIN_USERS_MANAGE_PERMISSIONS,
        _P.ADMIN_COMPANIES,
        _P.ADMIN_PRODUCTS,
        _P.ADMIN_CLIENTS,
        _P.ADMIN_SITES,
        _P.ADMIN_WEIGHBRIDGE,
        _P.ADMIN_NOTIFICATIONS,
        _P.ADMIN_SYSTEM,
        _P.ADMIN_SECURITY_ALERTS,
    ],
    "Special Permissions": [_P.EMERGENCY_OVERRIDE, _P.RECORDS_DELETE],
}

# Transporters get no products, clients or sites.
_TRANSPORTER: PermissionCategories = {
    "Asset Management": [_P.ASSETS_VIEW, _P.ASSETS_ADD, _P.ASSETS_EDIT, _P.ASSETS_DELETE],
    "Order Management": [_P.ORDERS_VIEW, _P.ORDERS_VIEW_ALL],
    "Pre-Booking Management": [_P.PRE_BOOKING_VIEW, _P.PRE_BOOKING_CREATE, _P.PRE_BOOKING_EDIT],
    "Operational Flow": [_P.SECURITY_IN, _P.SECURITY_OUT],
    "Administrative": [
        _P.ADMIN_USERS,
        _P.ADMIN_USERS_MANAGE_GLOBAL_ADMINS,
        _P.ADMIN_USERS_MANAGE_PERMISSIONS,
        _P.ADMIN_COMPANIES,
        _P.ADMIN_NOTIFICATIONS,
    ],
}

_LOGISTICS_COORDINATOR: PermissionCategories = {
    "Asset Management": [_P.ASSETS_VIEW],
    "Order Management": [
        _P.ORDERS_VIEW,
        _P.ORDERS_CREATE,
        _P.ORDERS_ALLOCATE,
        _P.ORDERS_CANCEL,
        _P.ORDERS_VIEW_ALL,
    ],
    "Pre-Booking Management": [_P.PRE_BOOKING_VIEW, _P.PRE_BOOKING_CREATE, _P.PRE_BOOKING_EDIT],
    "Administrative": [
        _P.ADMIN_USERS,
        _P.ADMIN_USERS_MANAGE_GLOBAL_ADMINS,
        _P.ADMIN_USERS_MANAGE_PERMISSIONS,
        _P.ADMIN_COMPANIES,
        _P.ADMIN_NOTIFICATIONS,
    ],
}

CATEGORIES_BY_COMPANY_TYPE: dict[CompanyType, PermissionCategories] = {
    CompanyType.MINE: _MINE,
    CompanyType.TRANSPORTER: _TRANSPORTER,
    CompanyType.LOGISTICS_COORDINATOR: _LOGISTICS_COORDINATOR,
}


def permission_categories_for(company_type: str | None) -> PermissionCategories:
    """Categories for company_type; unknown or missing types get the mine catalog.

    Returns a fresh copy, so callers may edit it freely.
    """
    try:
        categories = CATEGORIES_BY_COMPANY_TYPE[CompanyType(company_type)]
    except ValueError:
        categories = _MINE
    return {name: list(keys) for name, keys in categories.items()}


def available_permissions_for(company_type: str | None) -> list[PermissionKey]:
    """Flat list of keys a company type can grant."""
    return [
        key
        for keys in permission_categories_for(company_type).values()
        for key in keys
    ]


def is_permission_valid_for(permission: PermissionKey, company_type: str | None) -> bool:
    return permission in available_permissions_for(company_type)


def filter_permissions_for(
    permissions: Iterable[PermissionKey], company_type: str | None
) -> list[PermissionKey]:
    """Drop keys the company type cannot grant, keeping input order."""
    available = set(available_permissions_for(company_type))
    return [p for p in permissions if p in available]
