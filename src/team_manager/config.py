# Largest team that can be sent into a simulation
MAX_TEAM_SIZE = 5
