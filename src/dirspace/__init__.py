"""dirspace: parallel directory disk-usage analyzer."""
