# deltaguard - Application shell (CLI)
