"""Page level PDF tools: selection engine, engine adapter and orchestrator."""
