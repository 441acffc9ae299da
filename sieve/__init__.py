"""
SIEVE - Substring Index for Entry Visibility and Enumeration

Incremental search over the static post list of a personal blog. The list is
read once into an immutable index; every change to the search box re-runs a
multi-field substring filter and publishes the visible count.

Architecture:
- Indexing Context: Content loading and normalized Entry/Index construction
- Filtering Context: Query normalization, matching, visibility and count reporting
"""

__version__ = "0.1.0"
