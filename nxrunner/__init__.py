"""nx-runner GitHub Actions CLI tool.

Runs Nx targets for a CI invocation in one of three modes: every project,
an explicit project list, or the projects affected between two git
boundaries resolved from the triggering event.

Usage:
    python -m nxrunner run [options]
    nx-runner run [options]

Structure:
    nxrunner/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── run_config.py    # RunConfig from action inputs
    │   ├── event_context.py # EventContext, EventKind
    │   ├── run_mode.py      # RunMode selection
    │   └── boundaries.py    # GitBoundaries
    ├── services/            # Business logic services
    │   ├── boundary_resolver.py
    │   ├── git_operations.py
    │   └── nx_dispatcher.py
    ├── infrastructure/      # External system interactions
    │   ├── nx/runner.py
    │   └── github/
    └── commands/            # Thin command orchestrators
        └── run_nx.py
"""
