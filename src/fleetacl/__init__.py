"""FleetACL - permission evaluation service for the fleet and weighbridge platform."""

__version__ = "0.1.0"
