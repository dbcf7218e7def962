"""Company types - scope which permissions a company's roles can use."""

from enum import StrEnum


class CompanyType(StrEnum):
    """Kinds of company operating on the platform."""

    MINE = "mine"
    TRANSPORTER = "transporter"
    LOGISTICS_COORDINATOR = "logistics_coordinator"
