"""Event-to-entity reconciliation rules."""

from __future__ import annotations

from .actions import Action, NoOp, Remove, Upsert, apply_action
from .attributes import (
    BindingAttributes,
    EventAttributes,
    OperationAttributes,
    ProposalAttributes,
    RelationAttributes,
    RuleAttributes,
    TransferAttributes,
    extract_attributes,
)
from .operations import (
    AttributeOperationReconciler,
    BindingReconciler,
    RelationReconciler,
    RuleReconciler,
    reconcile_binding,
    reconcile_block,
    reconcile_proposal,
    reconcile_relation,
    reconcile_rule,
)
from .transfers import (
    TRANSFER_EVENT_KIND,
    TransferAggregator,
    build_transfer,
    find_evidence,
    reconcile_transfer,
)

__all__ = [
    "TRANSFER_EVENT_KIND",
    "Action",
    "AttributeOperationReconciler",
    "BindingAttributes",
    "BindingReconciler",
    "EventAttributes",
    "NoOp",
    "OperationAttributes",
    "ProposalAttributes",
    "RelationAttributes",
    "RelationReconciler",
    "Remove",
    "RuleAttributes",
    "RuleReconciler",
    "TransferAggregator",
    "TransferAttributes",
    "Upsert",
    "apply_action",
    "build_transfer",
    "extract_attributes",
    "find_evidence",
    "reconcile_binding",
    "reconcile_block",
    "reconcile_proposal",
    "reconcile_relation",
    "reconcile_rule",
    "reconcile_transfer",
]
