"""
Core pipeline.

Components:
- errors.py: user-facing error hierarchy (RemError and friends)
- parser.py: raw input line -> typed Command
- commands.py: Command variants + the single execute() contract
- engine.py: parse/execute/report glue used by connectors
- state.py: AppState (settings + store + task list for one session)
"""
