"""Domain layer: store ports and the offering distribution engine."""
