"""sqldiag: coded, positioned diagnostics for a SQL language validator."""
