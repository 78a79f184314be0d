"""Dashboard view: derivation engine, table and map presentation."""
