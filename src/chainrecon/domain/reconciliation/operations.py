"""Attribute-operation reconcilers.

An event carrying ``operation_type`` is mapped onto exactly one entity:

- ``insert`` builds the entity from the event and overwrites whatever is stored;
- ``update`` rewrites the event-carried fields of an existing entity;
- ``delete`` removes an existing entity.

``update`` and ``delete`` on an absent key, and unknown operation types, are
no-ops so that replayed or reordered deliveries never fail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from chainrecon.domain.model import (
    Binding,
    Block,
    Entity,
    OperationType,
    Proposal,
    Relation,
    Rule,
)

from .actions import Action, NoOp, Remove, Upsert, apply_action
from .attributes import (
    BindingAttributes,
    OperationAttributes,
    ProposalAttributes,
    RelationAttributes,
    RuleAttributes,
    extract_attributes,
)
from .keys import binding_key, block_key, proposal_key, relation_key, rule_key

if TYPE_CHECKING:
    from chainrecon.domain.model import BlockHeader, Event
    from chainrecon.domain.ports import EntityStore


log = getLogger(__name__)


class AttributeOperationReconciler[TEntity: Entity, TAttributes: OperationAttributes](ABC):
    """Template for insert/update/delete reconciliation of one entity type."""

    entity_type: type[TEntity]
    attributes_model: type[TAttributes]

    @abstractmethod
    def key_for(self, attributes: TAttributes) -> str: ...

    @abstractmethod
    def build(self, key: str, attributes: TAttributes) -> TEntity:
        """Create a fresh entity from an ``insert`` event."""

    @abstractmethod
    def updated(self, existing: TEntity, attributes: TAttributes) -> TEntity:
        """Return ``existing`` with the fields carried by an ``update`` event replaced."""

    def decide(self, store: EntityStore, key: str, attributes: TAttributes) -> Action:
        operation = attributes.operation
        if operation is None:
            return NoOp(f"unknown operation_type {attributes.operation_type!r}")
        if operation is OperationType.INSERT:
            return Upsert(self.build(key, attributes))

        existing = store.load(self.entity_type, key)
        if existing is None:
            return NoOp(f"{self.entity_type.__name__} {key!r} not found")
        if operation is OperationType.UPDATE:
            return Upsert(self.updated(existing, attributes))
        return Remove(self.entity_type, key)

    def __call__(self, store: EntityStore, event: Event) -> Action:
        attributes = extract_attributes(self.attributes_model, event)
        key = self.key_for(attributes)
        action = self.decide(store, key, attributes)
        if isinstance(action, NoOp):
            log.debug("Skipping %s event for %r: %s", event.kind, key, action.reason)
        apply_action(store, action)
        return action


class RuleReconciler(AttributeOperationReconciler[Rule, RuleAttributes]):
    entity_type = Rule
    attributes_model = RuleAttributes

    def key_for(self, attributes: RuleAttributes) -> str:
        return rule_key(attributes)

    def build(self, key: str, attributes: RuleAttributes) -> Rule:
        return Rule(
            name=key,
            content=attributes.require("rule_content"),
            hash=attributes.require("rule_hash"),
        )

    def updated(self, existing: Rule, attributes: RuleAttributes) -> Rule:
        return replace(
            existing,
            content=attributes.require("rule_content"),
            hash=attributes.require("rule_hash"),
        )


class BindingReconciler(AttributeOperationReconciler[Binding, BindingAttributes]):
    entity_type = Binding
    attributes_model = BindingAttributes

    def key_for(self, attributes: BindingAttributes) -> str:
        return binding_key(attributes)

    def build(self, key: str, attributes: BindingAttributes) -> Binding:
        return Binding(
            name=key,
            content=attributes.require("binding_content"),
            hash=attributes.require("binding_hash"),
            rules=attributes.rule_names(),
        )

    def updated(self, existing: Binding, attributes: BindingAttributes) -> Binding:
        # rules are replaced wholesale, never merged
        return replace(
            existing,
            content=attributes.require("binding_content"),
            hash=attributes.require("binding_hash"),
            rules=attributes.rule_names(),
        )


class RelationReconciler(AttributeOperationReconciler[Relation, RelationAttributes]):
    entity_type = Relation
    attributes_model = RelationAttributes

    def key_for(self, attributes: RelationAttributes) -> str:
        return relation_key(attributes)

    def build(self, key: str, attributes: RelationAttributes) -> Relation:
        return Relation(contract_address=key, binding=attributes.require("binding_name"))

    def updated(self, existing: Relation, attributes: RelationAttributes) -> Relation:
        return replace(existing, binding=attributes.require("binding_name"))


reconcile_rule = RuleReconciler()
reconcile_binding = BindingReconciler()
reconcile_relation = RelationReconciler()


def reconcile_proposal(store: EntityStore, event: Event) -> Action:
    """Record a proposal outcome; a later outcome for the same id overwrites it."""

    attributes = extract_attributes(ProposalAttributes, event)
    action = Upsert(Proposal(id=proposal_key(attributes), result=attributes.proposal_result))
    apply_action(store, action)
    return action


def reconcile_block(store: EntityStore, header: BlockHeader) -> Action:
    """Record an observed block header."""

    action = Upsert(
        Block(
            hash=block_key(header),
            height=header.height,
            app_hash=header.app_hash,
            data_hash=header.data_hash,
            proposer_address=header.proposer_address,
            timestamp=header.time.unix_nanos,
        )
    )
    apply_action(store, action)
    return action
