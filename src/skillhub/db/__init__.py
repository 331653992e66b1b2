# src/skillhub/db/__init__.py
"""Document store configuration and utilities.

Import from the submodules (`skillhub.db.store`, `skillhub.db.session`)
directly; record models depend on `skillhub.db.time` and `skillhub.db.ids`,
so this package does not import the store eagerly.
"""
