"""diffwith - open git file comparisons in a diff viewer.

Resolves a two-sided comparison request (a revision and a file for each
side) into a directive a viewer can open: two content references, labels
for each side, a combined title and display options.

A well-structured CLI package following:
- CLI Architecture: Single entry point dispatcher with explicit parameters
- Domain Modeling: Parse-once pattern with immutable, type-safe models
- Services Pattern: Core services with dependency injection

Usage:
    python -m diffwith <command> [options]
    diffwith <command> [options]

Structure:
    diffwith/
    ├── __main__.py          # Entry point dispatcher
    ├── config.py            # YAML settings
    ├── logging_config.py    # Root logger setup
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── revision.py      # Revision markers and shortening
    │   ├── comparison.py    # Requests, resolved sides, directives
    │   └── labels.py        # Label and title derivation
    ├── services/            # Business logic services
    │   ├── git_operations.py
    │   └── comparison_resolver.py
    ├── infrastructure/      # External system interactions
    │   ├── git/runner.py
    │   ├── viewer/          # Diff tool and console viewers
    │   └── messages.py
    └── commands/            # Thin command orchestrators
        ├── compare.py
        └── compare_commit.py
"""
