"""Natural-key derivation for every entity type."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chainrecon.domain.model import BlockHeader, Transaction

    from .attributes import (
        BindingAttributes,
        ProposalAttributes,
        RelationAttributes,
        RuleAttributes,
    )


def rule_key(attributes: RuleAttributes) -> str:
    return attributes.rule_name


def binding_key(attributes: BindingAttributes) -> str:
    return attributes.binding_name


def relation_key(attributes: RelationAttributes) -> str:
    return attributes.contract_address


def proposal_key(attributes: ProposalAttributes) -> str:
    return attributes.proposal_id


def block_key(header: BlockHeader) -> str:
    return header.hash


def transfer_key(transaction: Transaction) -> str:
    """Transfers are transaction-scoped: one per transaction hash."""

    return transaction.hash
