"""Reconciliation of a DNS zone against a service directory."""

from __future__ import annotations

from .engine import ReconcileResult, ZoneReconciler, reconcile

__all__ = ["ReconcileResult", "ZoneReconciler", "reconcile"]
