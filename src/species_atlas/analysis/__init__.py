"""Cross-datasource merging.

Each module combines outputs from 2+ datasources into the structures the
flows return.  This is the domain logic layer.

Dependency rule: analysis/ imports from datasources/ models only.
It never fetches data.

Modules:
  - merge: generated entry + every source contribution -> final SpeciesRecord

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function::

       from species_atlas.datasources.inaturalist import CommunityContribution
       from species_atlas.schemas import Observation

       def correlate_something(
           observations: list[Observation],
           community: CommunityContribution,
       ) -> SomeProfile:
           ...

2. Rules:
   - Import datasource *models* only (never call fetch functions here).
   - No I/O, no HTTP, no Prefect decorators.

3. Call it from a flow in ``flows/`` and add tests in ``tests/test_{name}.py``.
"""

from species_atlas.analysis.merge import (
    Contributions,
    first_geotagged,
    interleave_galleries,
    merge_record,
    select_primary_image,
)

__all__ = [
    "Contributions",
    "first_geotagged",
    "interleave_galleries",
    "merge_record",
    "select_primary_image",
]
