"""Gateways wrapping every machine-level side effect hookstrap performs.

Each gateway ships an ABC (``abc.py``), the production implementation
(``real.py``), an in-memory fake for tests (``fake.py``) and, where the
gateway mutates state, a dry-run wrapper (``dry_run.py``).
"""
