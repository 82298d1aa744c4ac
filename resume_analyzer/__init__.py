"""Resume document ingestion and AI-powered resume analysis."""
