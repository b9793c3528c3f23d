"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, low-level helpers
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Every fetch function is best-effort: it returns an empty contribution
(``[]``, ``None``, an empty dataclass) when the source is slow, down or has
nothing, and never raises.  The generative source is the one exception:
its text calls raise, and the flow decides what that means.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``weather/`` for a minimal example, ``gbif/`` for a richer one.

2. Write fetch functions on top of ``fetch_json``::

       from species_atlas.services.http import fetch_json

       def fetch_something(name: str) -> list[str]:
           data = fetch_json(API_URL, {"q": name})
           if not isinstance(data, dict):
               return []
           return data.get("results", [])

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/aggregate.py``):
   - Add a ``@task`` that calls your fetch function
   - Submit it with the other tier-1 tasks in ``aggregate_species()``
   - Merge its result in ``merge_record()``

5. Add tests in ``tests/test_{name}.py``.
"""
