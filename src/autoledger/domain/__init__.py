"""Domain layer for autoledger application.

Services are imported from their modules (``autoledger.domain.posting`` and so
on) so that the database layer can import entities without a cycle.
"""
