"""Domain layer: compatibility catalog model, reconciliation and aggregation."""
