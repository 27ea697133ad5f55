"""Contribution awarder domain service."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import logfire

from portal.domain.error import ConflictError, NotFoundError
from portal.domain.model.award import AwardEvent, AwardPolicy
from portal.domain.model.comment import Comment
from portal.domain.model.content import ContentItem
from portal.domain.repository import (
    AccountRepository,
    AwardRepository,
    ContentRepository,
    TransactionManager,
)
from portal.domain.value import (
    AccountId,
    AwardEventId,
    AwardReason,
    ContentId,
    Transition,
)

from .base import Service

ZERO = Decimal("0")


@dataclass(frozen=True)
class AwardResult:
    """Outcome of a single award."""

    account_id: AccountId
    delta: Decimal  # Delta actually applied (0 when replayed)
    balance: Decimal
    applied: bool


@dataclass(frozen=True)
class CommentAward:
    """Awards made for one posted comment."""

    author: AwardResult
    owner: AwardResult | None  # None when the author owns the content


class ContributionAwarder(Service):
    """The only writer of account balances and content points-earned caches.

    Every award is recorded under a unique event key in the same atomic unit
    as the balance change, so replaying an event never applies it twice and
    the sum of recorded deltas always equals the change in balance.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        content_repository: ContentRepository,
        award_repository: AwardRepository,
        transaction_manager: TransactionManager,
        policy: AwardPolicy,
    ) -> None:
        """Initialize contribution awarder.

        Args:
            account_repository: Account repository
            content_repository: Content repository
            award_repository: Award event repository
            transaction_manager: Atomic unit provider
            policy: Award schedule in effect
        """
        self.account_repository = account_repository
        self.content_repository = content_repository
        self.award_repository = award_repository
        self.transaction_manager = transaction_manager
        self.policy = policy

    async def award(
        self,
        account_id: AccountId,
        delta: Decimal,
        event_key: str,
        reason: AwardReason,
        content_id: ContentId | None = None,
    ) -> AwardResult:
        """Apply a delta to an account's balance once per event key.

        Args:
            account_id: Account receiving the award
            delta: Signed points delta
            event_key: Logical event identifier
            reason: Domain event the award is for
            content_id: Content item the award is attributable to, if any

        Returns:
            Award result with the new balance; ``applied`` is False when the
            event key had already been awarded

        Raises:
            NotFoundError: If the account does not exist
        """
        with logfire.span(
            "contribution_awarder.award",
            account_id=str(account_id),
            delta=str(delta),
            event_key=event_key,
            reason=reason.value,
        ):
            async with self.transaction_manager.atomic():
                recorded = await self.award_repository.record(
                    AwardEvent(
                        id=AwardEventId(uuid4()),
                        event_key=event_key,
                        account_id=account_id,
                        content_id=content_id,
                        reason=reason,
                        delta=delta,
                        created_at=datetime.now(),
                    )
                )

                if not recorded:
                    account = await self.account_repository.find_by_id(account_id)
                    if not account:
                        raise NotFoundError("Account", str(account_id))
                    logfire.info("Award already applied", event_key=event_key)
                    return AwardResult(
                        account_id=account_id,
                        delta=ZERO,
                        balance=account.points,
                        applied=False,
                    )

                balance = await self.account_repository.add_points(account_id, delta)
                if balance is None:
                    logfire.warn("Award to non-existent account", account_id=str(account_id))
                    raise NotFoundError("Account", str(account_id))

                logfire.info(
                    "Award applied",
                    account_id=str(account_id),
                    delta=str(delta),
                    balance=str(balance),
                    reason=reason.value,
                )
                return AwardResult(
                    account_id=account_id, delta=delta, balance=balance, applied=True
                )

    async def award_for_transition(
        self, content: ContentItem, transition: Transition, event_key: str
    ) -> AwardResult:
        """Apply the creator delta for a reaction transition.

        The delta goes to the content owner and to the item's points-earned
        counter. It is suppressed (recorded as 0) when the reacting account
        owns the item.

        Args:
            content: Content item that was reacted to
            transition: Reaction transition from the ledger
            event_key: Logical event identifier for this transition

        Returns:
            Award result for the owner

        Raises:
            ConflictError: If the event key was already awarded, meaning a
                concurrent duplicate of this transition won the race
        """
        if transition.account_id == content.owner_id:
            delta = ZERO
        else:
            delta = self.policy.transition_delta(transition)

        async with self.transaction_manager.atomic():
            result = await self.award(
                content.owner_id,
                delta,
                event_key=event_key,
                reason=AwardReason.REACTION,
                content_id=content.id,
            )
            if not result.applied:
                raise ConflictError(
                    "Award", event_key, transition=transition, retryable=False
                )
            if delta != ZERO:
                await self.content_repository.adjust_counters(
                    content.id, points_delta=delta
                )
            return result

    async def award_for_comment(
        self, content: ContentItem, comment: Comment
    ) -> CommentAward:
        """Award the commenter and, unless they are the same, the content owner.

        Balances are updated in account id order, so two comments crossing
        between the same pair of accounts lock their rows in the same order.

        Args:
            content: Content item that was commented on
            comment: The new comment

        Returns:
            Awards made for the comment
        """
        awards = {
            comment.author_id: (
                self.policy.comment_author_award,
                f"comment:{comment.id}:author",
                AwardReason.COMMENT_AUTHORED,
            )
        }
        if comment.author_id != content.owner_id:
            awards[content.owner_id] = (
                self.policy.comment_owner_award,
                f"comment:{comment.id}:owner",
                AwardReason.COMMENT_RECEIVED,
            )

        async with self.transaction_manager.atomic():
            results: dict[AccountId, AwardResult] = {}
            for account_id in sorted(awards):
                delta, event_key, reason = awards[account_id]
                results[account_id] = await self.award(
                    account_id,
                    delta,
                    event_key=event_key,
                    reason=reason,
                    content_id=content.id,
                )

            owner = results.get(content.owner_id) if len(results) > 1 else None
            if owner and owner.applied and owner.delta != ZERO:
                await self.content_repository.adjust_counters(
                    content.id, points_delta=owner.delta
                )
            return CommentAward(author=results[comment.author_id], owner=owner)

    async def award_for_upload(self, content: ContentItem) -> AwardResult:
        """Award the uploader once per content item.

        Args:
            content: The uploaded content item

        Returns:
            Award result; ``applied`` is False for a repeated upload award
        """
        return await self.award(
            content.owner_id,
            self.policy.upload_award(content.content_type),
            event_key=f"upload:{content.id}",
            reason=AwardReason.UPLOAD,
            content_id=content.id,
        )
