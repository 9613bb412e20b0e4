"""World state, movement and experience rules used by the combat layer."""
