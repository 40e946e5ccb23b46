"""Service layer: resolution, visited-set rules, suggestions.

The core components (Resolver, VisitedSetManager, AutocompleteIndex)
return domain outcomes. TrackerService wraps them in ServiceResult for
the CLI and web adapters. Services may import from domain and
infrastructure; they must never import from commands, output, or web.
"""
