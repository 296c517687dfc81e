"""
Shared kernel for the RMS search service: configuration, logging, domain
exceptions and collaborator resilience.
"""
