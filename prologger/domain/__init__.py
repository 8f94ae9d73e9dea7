"""Domain layer: severities, per-call options and payload conversion."""
