"""Content interaction domain service.

Facade used by the application layer for every interaction that moves
points: toggling a reaction, posting a comment and recording an upload.
Each call runs the ledger/comment write and its awards as one atomic unit,
retrying a bounded number of times when it loses an optimistic concurrency
check.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Awaitable, Callable, TypeVar
from uuid import uuid4

import logfire

from portal.domain.error import (
    ConflictError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from portal.domain.model.comment import MAX_COMMENT_LENGTH, Comment
from portal.domain.model.content import ContentItem
from portal.domain.repository import (
    AwardRepository,
    CommentRepository,
    ContentRepository,
    TransactionManager,
)
from portal.domain.value import (
    AccountId,
    CommentId,
    ContentId,
    ReactionKind,
    ReactionState,
)

from .base import Service
from .contribution_awarder import ContributionAwarder
from .reaction_ledger import ReactionLedger

T = TypeVar("T")


@dataclass(frozen=True)
class ReactionOutcome:
    """Result of toggling a reaction."""

    content_id: ContentId
    account_id: AccountId
    previous_state: ReactionState
    state: ReactionState
    like_count: int
    dislike_count: int
    creator_delta: Decimal
    replayed: bool = False


@dataclass(frozen=True)
class CommentOutcome:
    """Result of posting a comment."""

    comment: Comment
    author_delta: Decimal
    author_balance: Decimal
    owner_delta: Decimal


@dataclass(frozen=True)
class UploadOutcome:
    """Result of recording an upload award."""

    content_id: ContentId
    owner_id: AccountId
    awarded: bool
    delta: Decimal
    balance: Decimal


class ContentInteractionService(Service):
    """Coordinates the reaction ledger and the contribution awarder."""

    def __init__(
        self,
        reaction_ledger: ReactionLedger,
        contribution_awarder: ContributionAwarder,
        content_repository: ContentRepository,
        comment_repository: CommentRepository,
        award_repository: AwardRepository,
        transaction_manager: TransactionManager,
        max_conflict_retries: int = 3,
    ) -> None:
        """Initialize content interaction service.

        Args:
            reaction_ledger: Reaction ledger
            contribution_awarder: Contribution awarder
            content_repository: Content repository
            comment_repository: Comment repository
            award_repository: Award event repository (replay detection)
            transaction_manager: Atomic unit provider
            max_conflict_retries: Retries after a lost concurrency check
        """
        self.reaction_ledger = reaction_ledger
        self.contribution_awarder = contribution_awarder
        self.content_repository = content_repository
        self.comment_repository = comment_repository
        self.award_repository = award_repository
        self.transaction_manager = transaction_manager
        self.max_conflict_retries = max_conflict_retries

    async def toggle_reaction(
        self,
        content_id: ContentId,
        account_id: AccountId,
        desired: ReactionKind | str,
        request_key: str | None = None,
    ) -> ReactionOutcome:
        """Like or dislike a content item, toggling or switching as needed.

        Duplicate deliveries are absorbed at the transition level:
        - with a ``request_key``, a request whose transition was already
          awarded is answered from current state without applying anything
        - when the reaction changed concurrently and the stored state already
          equals the state this call was moving to, the call is a no-op

        Args:
            content_id: Content item
            account_id: Reacting account
            desired: LIKE or DISLIKE
            request_key: Client idempotency key for retried deliveries

        Returns:
            The new reaction state and the item's counts

        Raises:
            InvalidInputError: If desired is not a known reaction
            NotFoundError: If the content item, the reacting account or the
                owner does not exist
            ConflictError: If concurrency retries are exhausted
        """
        desired = self.reaction_ledger.parse_kind(desired)

        # Each call without a key is its own logical event
        event_key = (
            f"reaction:{content_id}:{account_id}:{request_key}"
            if request_key
            else f"reaction:{content_id}:{account_id}:{uuid4()}"
        )

        async def attempt() -> ReactionOutcome:
            if request_key and await self.award_repository.find_by_event_key(event_key):
                logfire.info("Replayed reaction request", event_key=event_key)
                return await self._current_outcome(content_id, account_id)

            content = await self._get_content(content_id)
            transition = await self.reaction_ledger.apply_reaction(
                content_id, account_id, desired
            )
            award = await self.contribution_awarder.award_for_transition(
                content, transition, event_key
            )
            refreshed = await self._get_content(content_id)
            return ReactionOutcome(
                content_id=content_id,
                account_id=account_id,
                previous_state=transition.from_state,
                state=transition.to_state,
                like_count=refreshed.like_count,
                dislike_count=refreshed.dislike_count,
                creator_delta=award.delta,
            )

        async def absorb(error: ConflictError) -> ReactionOutcome | None:
            if request_key and await self.award_repository.find_by_event_key(event_key):
                return await self._current_outcome(content_id, account_id)
            if error.transition is not None:
                current = await self.reaction_ledger.current_reaction(
                    content_id, account_id
                )
                if current is error.transition.to_state:
                    logfire.info(
                        "Concurrent duplicate reaction absorbed",
                        content_id=str(content_id),
                        account_id=str(account_id),
                        transition=str(error.transition),
                    )
                    return await self._current_outcome(content_id, account_id)
            return None

        with logfire.span(
            "interaction_service.toggle_reaction",
            content_id=str(content_id),
            account_id=str(account_id),
            desired=desired.value,
            has_request_key=request_key is not None,
        ):
            return await self._run_atomic("toggle_reaction", attempt, absorb)

    async def post_comment(
        self, content_id: ContentId, author_id: AccountId, text: str
    ) -> CommentOutcome:
        """Post a comment and award the commenter and the content owner.

        Args:
            content_id: Content item being commented on
            author_id: Commenting account
            text: Comment text

        Returns:
            The saved comment and the awards made

        Raises:
            InvalidInputError: If text is empty or too long
            NotFoundError: If the content item or an account does not exist
        """
        text = (text or "").strip()
        if not text:
            raise InvalidInputError("Comment text must not be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            raise InvalidInputError(
                f"Comment text must be at most {MAX_COMMENT_LENGTH} characters"
            )

        async def attempt() -> CommentOutcome:
            content = await self._get_content(content_id)
            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    content_id=content_id,
                    author_id=author_id,
                    text=text,
                    created_at=datetime.now(),
                )
            )
            await self.content_repository.adjust_counters(content_id, comment_delta=1)
            awards = await self.contribution_awarder.award_for_comment(content, comment)
            return CommentOutcome(
                comment=comment,
                author_delta=awards.author.delta,
                author_balance=awards.author.balance,
                owner_delta=awards.owner.delta if awards.owner else Decimal("0"),
            )

        with logfire.span(
            "interaction_service.post_comment",
            content_id=str(content_id),
            author_id=str(author_id),
            text_length=len(text),
        ):
            outcome = await self._run_atomic("post_comment", attempt)
            logfire.info(
                "Comment posted",
                comment_id=str(outcome.comment.id),
                content_id=str(content_id),
            )
            return outcome

    async def record_upload(
        self, content_id: ContentId, owner_id: AccountId
    ) -> UploadOutcome:
        """Award the uploader for a newly created content item, once.

        Storage of the uploaded file must have completed before this is
        called; retries of the same upload are answered without awarding.

        Args:
            content_id: The uploaded content item
            owner_id: Account that uploaded it

        Returns:
            Upload award outcome

        Raises:
            NotFoundError: If the content item does not exist
            NotAuthorizedError: If the account does not own the content item
        """

        async def attempt() -> UploadOutcome:
            content = await self._get_content(content_id)
            if content.owner_id != owner_id:
                raise NotAuthorizedError(
                    "claim the upload award for", "content", str(content_id), str(owner_id)
                )
            result = await self.contribution_awarder.award_for_upload(content)
            return UploadOutcome(
                content_id=content_id,
                owner_id=owner_id,
                awarded=result.applied,
                delta=result.delta,
                balance=result.balance,
            )

        with logfire.span(
            "interaction_service.record_upload",
            content_id=str(content_id),
            owner_id=str(owner_id),
        ):
            return await self._run_atomic("record_upload", attempt)

    async def _run_atomic(
        self,
        operation: str,
        attempt: Callable[[], Awaitable[T]],
        absorb: Callable[[ConflictError], Awaitable[T | None]] | None = None,
    ) -> T:
        """Run ``attempt`` as an atomic unit, retrying after lost conflicts.

        A failed attempt leaves no writes behind. After a conflict ``absorb``
        may turn it into a result (a duplicate that already happened) instead
        of retrying.
        """
        attempt_number = 0
        while True:
            attempt_number += 1
            try:
                async with self.transaction_manager.atomic():
                    return await attempt()
            except ConflictError as e:
                if absorb is not None:
                    absorbed = await absorb(e)
                    if absorbed is not None:
                        return absorbed
                if not e.retryable:
                    raise
                if attempt_number > self.max_conflict_retries:
                    logfire.error(
                        "Conflict retries exhausted",
                        operation=operation,
                        retries=self.max_conflict_retries,
                        resource=e.resource,
                        identifier=e.identifier,
                    )
                    raise
                logfire.warn(
                    "Conflict, retrying",
                    operation=operation,
                    attempt=attempt_number,
                    resource=e.resource,
                    identifier=e.identifier,
                )

    async def _get_content(self, content_id: ContentId) -> ContentItem:
        content = await self.content_repository.find_by_id(content_id)
        if not content:
            raise NotFoundError("Content", str(content_id))
        return content

    async def _current_outcome(
        self, content_id: ContentId, account_id: AccountId
    ) -> ReactionOutcome:
        content = await self._get_content(content_id)
        state = await self.reaction_ledger.current_reaction(content_id, account_id)
        return ReactionOutcome(
            content_id=content_id,
            account_id=account_id,
            previous_state=state,
            state=state,
            like_count=content.like_count,
            dislike_count=content.dislike_count,
            creator_delta=Decimal("0"),
            replayed=True,
        )
