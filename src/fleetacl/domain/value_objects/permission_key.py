"""Permission catalog - the closed set of keys roles and overrides may reference."""

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Final

from fleetacl.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Role sentinel granting every key. Never a catalog member.
WILDCARD: Final = "*"


class PermissionKey(StrEnum):
    """Protected capabilities. Values are persisted; renaming one is a migration."""

    # Asset management
    ASSETS_VIEW = "assets.view"
    ASSETS_ADD = "assets.add"
    ASSETS_EDIT = "assets.edit"
    ASSETS_DELETE = "assets.delete"

    # Order management
    ORDERS_VIEW = "orders.view"
    ORDERS_CREATE = "orders.create"
    ORDERS_ALLOCATE = "orders.allocate"
    ORDERS_CANCEL = "orders.cancel"
    ORDERS_VIEW_ALL = "orders.viewAll"
    ORDERS_EDIT_COMPLETED = "orders.editCompleted"

    # Pre-booking
    PRE_BOOKING_VIEW = "preBooking.view"
    PRE_BOOKING_CREATE = "preBooking.create"
    PRE_BOOKING_EDIT = "preBooking.edit"
    PRE_BOOKING_BYPASS = "preBooking.bypass"

    # Operational flows
    SECURITY_IN = "security.in"
    SECURITY_OUT = "security.out"
    WEIGHBRIDGE_TARE = "weighbridge.tare"
    WEIGHBRIDGE_GROSS = "weighbridge.gross"
    WEIGHBRIDGE_CALIBRATE = "weighbridge.calibrate"
    WEIGHBRIDGE_OVERRIDE = "weighbridge.override"

    # Administrative
    ADMIN_COMPANIES = "admin.companies"
    ADMIN_COMPANIES_VIEW = "admin.companies.view"
    ADMIN_USERS = "admin.users"
    ADMIN_USERS_VIEW = "admin.users.view"
    ADMIN_USERS_VIEW_ALL_COMPANIES = "admin.users.viewAllCompanies"
    ADMIN_USERS_MANAGE_GLOBAL_ADMINS = "admin.users.manageGlobalAdmins"
    ADMIN_USERS_MANAGE_PERMISSIONS = "admin.users.managePermissions"
    ADMIN_ROLES = "admin.roles"
    ADMIN_ROLES_VIEW = "admin.roles.view"
    ADMIN_PRODUCTS = "admin.products"
    ADMIN_PRODUCTS_VIEW = "admin.products.view"
    ADMIN_ORDER_SETTINGS = "admin.orderSettings"
    ADMIN_CLIENTS = "admin.clients"
    ADMIN_CLIENTS_VIEW = "admin.clients.view"
    ADMIN_SITES = "admin.sites"
    ADMIN_SITES_VIEW = "admin.sites.view"
    ADMIN_WEIGHBRIDGE = "admin.weighbridge"
    ADMIN_NOTIFICATIONS = "admin.notifications"
    ADMIN_NOTIFICATIONS_VIEW = "admin.notifications.view"
    ADMIN_SYSTEM = "admin.system"
    ADMIN_SECURITY_ALERTS = "admin.securityAlerts"

    # Reports
    REPORTS_DAILY = "reports.daily"
    REPORTS_MONTHLY = "reports.monthly"
    REPORTS_CUSTOM = "reports.custom"
    REPORTS_EXPORT = "reports.export"

    # Special
    EMERGENCY_OVERRIDE = "emergency.override"
    RECORDS_DELETE = "records.delete"

    @classmethod
    def parse(cls, value: object) -> "PermissionKey":
        """Return the catalog member for value or raise ValidationError."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown permission key: {value!r}") from None


PERMISSION_LABELS: dict[PermissionKey, str] = {
    PermissionKey.ASSETS_VIEW: "View assets",
    PermissionKey.ASSETS_ADD: "Add new assets",
    PermissionKey.ASSETS_EDIT: "Edit existing assets",
    PermissionKey.ASSETS_DELETE: "Delete assets",
    PermissionKey.ORDERS_VIEW: "View orders",
    PermissionKey.ORDERS_CREATE: "Create new orders",
    PermissionKey.ORDERS_ALLOCATE: "Allocate orders",
    PermissionKey.ORDERS_CANCEL: "Cancel orders",
    PermissionKey.ORDERS_VIEW_ALL: "View all orders (not just assigned)",
    PermissionKey.ORDERS_EDIT_COMPLETED: "Edit completed orders",
    PermissionKey.PRE_BOOKING_VIEW: "View pre-bookings",
    PermissionKey.PRE_BOOKING_CREATE: "Create pre-bookings",
    PermissionKey.PRE_BOOKING_EDIT: "Edit pre-bookings",
    PermissionKey.PRE_BOOKING_BYPASS: "Bypass pre-booking requirements",
    PermissionKey.SECURITY_IN: "Perform security in checks",
    PermissionKey.SECURITY_OUT: "Perform security out checks",
    PermissionKey.WEIGHBRIDGE_TARE: "Capture tare weight",
    PermissionKey.WEIGHBRIDGE_GROSS: "Capture gross weight",
    PermissionKey.WEIGHBRIDGE_CALIBRATE: "Perform weighbridge calibration",
    PermissionKey.WEIGHBRIDGE_OVERRIDE: "Manual weight override",
    PermissionKey.ADMIN_COMPANIES: "Manage companies",
    PermissionKey.ADMIN_COMPANIES_VIEW: "View companies",
    PermissionKey.ADMIN_USERS: "Manage users",
    PermissionKey.ADMIN_USERS_VIEW: "View users",
    PermissionKey.ADMIN_USERS_VIEW_ALL_COMPANIES: "View users from all companies",
    PermissionKey.ADMIN_USERS_MANAGE_GLOBAL_ADMINS: "Manage global admins",
    PermissionKey.ADMIN_USERS_MANAGE_PERMISSIONS: "Manage user permission overrides",
    PermissionKey.ADMIN_ROLES: "Manage roles",
    PermissionKey.ADMIN_ROLES_VIEW: "View roles",
    PermissionKey.ADMIN_PRODUCTS: "Manage products",
    PermissionKey.ADMIN_PRODUCTS_VIEW: "View products",
    PermissionKey.ADMIN_ORDER_SETTINGS: "Configure order settings",
    PermissionKey.ADMIN_CLIENTS: "Manage clients",
    PermissionKey.ADMIN_CLIENTS_VIEW: "View clients",
    PermissionKey.ADMIN_SITES: "Manage sites",
    PermissionKey.ADMIN_SITES_VIEW: "View sites",
    PermissionKey.ADMIN_WEIGHBRIDGE: "Configure weighbridge",
    PermissionKey.ADMIN_NOTIFICATIONS: "Configure notifications",
    PermissionKey.ADMIN_NOTIFICATIONS_VIEW: "View notification templates",
    PermissionKey.ADMIN_SYSTEM: "System-wide settings",
    PermissionKey.ADMIN_SECURITY_ALERTS: "Configure security alerts",
    PermissionKey.REPORTS_DAILY: "View daily reports",
    PermissionKey.REPORTS_MONTHLY: "View monthly reports",
    PermissionKey.REPORTS_CUSTOM: "Create custom reports",
    PermissionKey.REPORTS_EXPORT: "Export report data",
    PermissionKey.EMERGENCY_OVERRIDE: "Emergency override access",
    PermissionKey.RECORDS_DELETE: "Delete records permanently",
}


def parse_role_keys(values: Iterable[object], *, strict: bool = True) -> list[str]:
    """Validate a role's key set: catalog keys plus the wildcard, deduplicated in order.

    In lenient mode (persisted records) unknown keys are dropped with a warning
    instead of raising.
    """
    result: list[str] = []
    for value in values:
        if value == WILDCARD:
            key: str = WILDCARD
        else:
            try:
                key = PermissionKey.parse(value)
            except ValidationError:
                if strict:
                    raise
                logger.warning("Dropping unknown role permission key", extra={"key": value})
                continue
        if key not in result:
            result.append(key)
    return result


def parse_overrides(
    mapping: Mapping[object, object], *, strict: bool = True
) -> dict[PermissionKey, bool]:
    """Validate a user's override map: catalog keys to real booleans."""
    result: dict[PermissionKey, bool] = {}
    for raw_key, granted in mapping.items():
        try:
            key = PermissionKey.parse(raw_key)
            if not isinstance(granted, bool):
                raise ValidationError(
                    f"Override for {raw_key!r} must be a boolean, got {granted!r}"
                )
        except ValidationError:
            if strict:
                raise
            logger.warning("Dropping invalid permission override", extra={"key": raw_key})
            continue
        result[key] = granted
    return result
