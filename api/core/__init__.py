"""
Service plumbing shared by the feature packages: settings, the Postgres
store client and logging setup. Entity-specific SQL and output shapes live
in `entities/`.
"""
