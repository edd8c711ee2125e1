# deltaguard - Domain (pure string and URL primitives)
