"""
KERRDISK Service Layer: DiskService ABC and DiskRegistry.

Each computation family (thin disk structure, polynomial roots) is a
DiskService registered with the DiskRegistry. Services are looked up by
ID at runtime, and each service owns its own API endpoints, config
validation, and result format.

Classes:
    DiskService  - Abstract base class for all services
    DiskRegistry - Central lookup container for registered services

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from abc import ABC, abstractmethod


class DiskService(ABC):
    """
    Abstract base class for a KERRDISK service.

    Class Attributes
    ----------------
    id : str
        Unique service identifier (e.g. "thin_disk").
    name : str
        Human-readable display name.
    description : str
        One-liner for the service listing.
    category : str
        Grouping for the listing, e.g. "disk" or "numerics".
    status : str
        "live" or "coming_soon".
    """

    id = ""
    name = ""
    description = ""
    category = ""
    status = "coming_soon"

    @abstractmethod
    def validate(self, config):
        """
        Validate raw input and return normalized config dict.

        Raises
        ------
        ValueError
            If the config is invalid.
        """

    @abstractmethod
    def compute(self, config):
        """
        Run the service computation on a validated config.

        Returns
        -------
        dict
            JSON-serializable result with service-specific keys.
        """

    def register_routes(self, blueprint):
        """
        Mount service-specific API endpoints onto a Flask blueprint.

        Live services override this to register their namespaced
        endpoints (e.g. /api/thin-disk/profile).
        """
        pass

    def metadata(self):
        """Return service metadata: id, name, description, category, status."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "status": self.status,
        }


class DiskRegistry:
    """
    Central lookup container for registered DiskService instances.

    Services register themselves at app startup. The registry provides
    lookup by ID, listing, and iteration over live services for API
    route mounting.
    """

    def __init__(self):
        self._services = {}

    def register(self, service):
        """
        Register a service instance.

        Raises
        ------
        ValueError
            If a service with the same id is already registered.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def get(self, service_id):
        """Look up a service by id; None if not found."""
        return self._services.get(service_id)

    def list_all(self):
        """Metadata for all registered services, in registration order."""
        return [s.metadata() for s in self._services.values()]

    def live(self):
        """All services with status 'live'."""
        return [s for s in self._services.values()
                if s.status == "live"]
