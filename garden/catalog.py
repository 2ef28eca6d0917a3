"""Plant catalog: companion / enemy lookup for the placement engine.

The catalog is the only source of plant relationships the planner
consults.  It is injected into :class:`garden.planner.BedPlanner` rather
than imported globally, so tests can build small synthetic catalogs.

Relationship lists in the source data are advisory and not always
symmetric (tomato may list basil as a companion without basil listing
tomato).  Both directions are therefore checked:

* two plants are **compatible** unless *either* lists the other as an
  enemy;
* two plants are **companions** if *either* lists the other as a
  companion, unless they are enemies (enemy always wins).

Unknown plant IDs have no relationships at all.
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plant:
    plant_id: str
    name: str
    companion_ids: frozenset = field(default_factory=frozenset)
    avoid_ids: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_record(cls, record: dict) -> "Plant":
        """Build a Plant from a library dict (``id``, ``name``, ``companions``, ``avoid``)."""
        plant_id = str(record["id"])
        return cls(
            plant_id=plant_id,
            name=str(record.get("name") or plant_id),
            companion_ids=frozenset(record.get("companions") or ()),
            avoid_ids=frozenset(record.get("avoid") or ()),
        )


class PlantCatalog:
    """Read-only, in-memory lookup of plants by ID.

    Args:
        plants: iterable of :class:`Plant`.  A later entry with the same
            ID replaces an earlier one.
    """

    def __init__(self, plants):
        self._plants: dict[str, Plant] = {p.plant_id: p for p in plants}
        for plant_id, other_id in self.relationship_conflicts():
            logger.warning(
                "%s lists %s as both companion and enemy; treating as enemy",
                self.name_of(plant_id),
                self.name_of(other_id),
            )

    @classmethod
    def from_records(cls, records) -> "PlantCatalog":
        return cls(Plant.from_record(r) for r in records)

    def __contains__(self, plant_id) -> bool:
        return plant_id in self._plants

    def __len__(self) -> int:
        return len(self._plants)

    def ids(self) -> list[str]:
        return list(self._plants)

    def lookup(self, plant_id):
        """Return the :class:`Plant` for *plant_id*, or ``None`` if unknown."""
        return self._plants.get(plant_id)

    def name_of(self, plant_id: str) -> str:
        """Display name for *plant_id*; unknown IDs are returned as-is."""
        plant = self._plants.get(plant_id)
        return plant.name if plant else plant_id

    def enemy_count(self, plant_id: str) -> int:
        """Number of plants *plant_id* declares it must avoid (0 if unknown)."""
        plant = self._plants.get(plant_id)
        return len(plant.avoid_ids) if plant else 0

    # ----- relationships -----

    def are_compatible(self, plant_a: str, plant_b: str) -> bool:
        """True unless either plant lists the other as an enemy."""
        a = self._plants.get(plant_a)
        b = self._plants.get(plant_b)
        if a is None or b is None:
            return True
        return plant_b not in a.avoid_ids and plant_a not in b.avoid_ids

    def are_companions(self, plant_a: str, plant_b: str) -> bool:
        """True if either plant lists the other as a companion and neither avoids the other."""
        a = self._plants.get(plant_a)
        b = self._plants.get(plant_b)
        if a is None or b is None:
            return False
        if not self.are_compatible(plant_a, plant_b):
            return False
        return plant_b in a.companion_ids or plant_a in b.companion_ids

    def is_declared_companion(self, plant_id: str, other_id: str) -> bool:
        """True if *plant_id* itself lists *other_id* as a companion.

        This is the one-sided check used for placement scoring.  Companions
        missing from the catalog never count, and an enemy
        relationship in either direction still cancels it.
        """
        plant = self._plants.get(plant_id)
        if plant is None or other_id not in plant.companion_ids:
            return False
        if other_id not in self._plants:
            return False
        return self.are_compatible(plant_id, other_id)

    def relationship_conflicts(self) -> list[tuple[str, str]]:
        """Return ``(plant_id, other_id)`` pairs listed as both companion and enemy."""
        conflicts = []
        for plant in self._plants.values():
            for other_id in sorted(plant.companion_ids & plant.avoid_ids):
                conflicts.append((plant.plant_id, other_id))
        return conflicts
