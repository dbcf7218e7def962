"""Permission catalog endpoint for role and override editors."""

import falcon.asgi

from fleetacl.domain.services.permission_categories import permission_categories_for
from fleetacl.domain.value_objects import PERMISSION_LABELS, CompanyType


class PermissionCatalogResource:
    """GET /v1/permissions[?company_type=..] - grantable keys grouped by category."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        company_type = req.get_param("company_type")
        if company_type is not None and company_type not in set(CompanyType):
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown company type: {company_type}"}
            return

        categories = permission_categories_for(company_type)
        resp.media = {
            "company_type": company_type or CompanyType.MINE.value,
            "categories": [
                {
                    "name": name,
                    "permissions": [
                        {"key": str(key), "label": PERMISSION_LABELS[key]} for key in keys
                    ],
                }
                for name, keys in categories.items()
            ],
        }
        resp.status = falcon.HTTP_200
