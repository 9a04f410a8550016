"""GreenBuild Ledger: construction material sustainability tracking."""
