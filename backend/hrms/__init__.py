"""HRMS backend: REST endpoints over the HR record tables."""
