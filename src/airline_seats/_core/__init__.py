# Area: Core
"""
Game mechanics shared by the public state and game classes.

This package contains:
- Fixed economic constants
- Phase enum and transition table
- Action codec
- Demand model and scoring engine
- State serializer, player views, snapshots and final results

Modules are imported directly (e.g. `from ._core.codec import ...`);
nothing is re-exported here.
"""
