"""Domain layer: entities, ports and reconciliation rules."""
