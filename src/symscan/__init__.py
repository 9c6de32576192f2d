"""Symbol occurrence lookups over SCIP code-intelligence indexes."""
