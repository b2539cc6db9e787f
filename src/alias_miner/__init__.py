"""Mine shell history for frequently repeated command prefixes worth aliasing."""
