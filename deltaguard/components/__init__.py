# deltaguard - Components (atomic, run_* entry points)
