"""Reaction ledger domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from portal.domain.error import ConflictError, InvalidInputError, NotFoundError
from portal.domain.model.reaction import Reaction
from portal.domain.repository import (
    AccountRepository,
    ContentRepository,
    ReactionRepository,
)
from portal.domain.value import (
    AccountId,
    ContentId,
    ReactionKind,
    ReactionState,
    Transition,
)

from .base import Service


class ReactionLedger(Service):
    """Source of truth for who reacted how to which content item.

    Keeps at most one reaction per (item, account) and turns a repeated
    like/dislike into a state transition. The ledger maintains the item's
    like/dislike counters but never touches point balances; those are
    applied by the contribution awarder from the returned transition.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
    ) -> None:
        """Initialize reaction ledger.

        Args:
            reaction_repository: Reaction repository
            content_repository: Content repository (existence and counters)
            account_repository: Account repository (reacting account must exist)
        """
        self.reaction_repository = reaction_repository
        self.content_repository = content_repository
        self.account_repository = account_repository

    async def current_reaction(
        self, content_id: ContentId, account_id: AccountId
    ) -> ReactionState:
        """Get an account's current reaction on an item (NONE if it has none)."""
        reaction = await self.reaction_repository.find(content_id, account_id)
        return reaction.state if reaction else ReactionState.NONE

    async def apply_reaction(
        self,
        content_id: ContentId,
        account_id: AccountId,
        desired: ReactionKind | str,
    ) -> Transition:
        """Express a like or dislike and persist the resulting state.

        | current | desired | new state |
        |---------|---------|-----------|
        | NONE    | X       | X         |
        | X       | X       | NONE      |
        | X       | Y       | Y         |

        The write is a compare-and-swap against the version read here, so
        it must run inside an atomic unit together with the award for the
        returned transition.

        Args:
            content_id: Content item being reacted to
            account_id: Reacting account
            desired: LIKE or DISLIKE

        Returns:
            The transition that was persisted

        Raises:
            InvalidInputError: If desired is not a known reaction
            NotFoundError: If the content item or the reacting account does not exist
            ConflictError: If the reaction changed concurrently
        """
        desired = self.parse_kind(desired)

        with logfire.span(
            "reaction_ledger.apply_reaction",
            content_id=str(content_id),
            account_id=str(account_id),
            desired=desired.value,
        ):
            content = await self.content_repository.find_by_id(content_id)
            if not content:
                logfire.warn("Reaction on non-existent content", content_id=str(content_id))
                raise NotFoundError("Content", str(content_id))

            if not await self.account_repository.find_by_id(account_id):
                logfire.warn("Reaction by non-existent account", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))

            existing = await self.reaction_repository.find(content_id, account_id)
            current = existing.state if existing else ReactionState.NONE
            transition = Transition(
                content_id=content_id,
                account_id=account_id,
                from_state=current,
                to_state=current.after(desired),
            )

            now = datetime.now()
            if existing is None:
                written = await self.reaction_repository.insert_if_absent(
                    Reaction(
                        content_id=content_id,
                        account_id=account_id,
                        kind=desired,
                        version=1,
                        created_at=now,
                        updated_at=now,
                    )
                )
            elif transition.to_state is ReactionState.NONE:
                written = await self.reaction_repository.delete_if_version(
                    content_id, account_id, existing.version
                )
            else:
                written = await self.reaction_repository.update_if_version(
                    existing.model_copy(
                        update={
                            "kind": desired,
                            "version": existing.version + 1,
                            "updated_at": now,
                        }
                    ),
                    expected_version=existing.version,
                )

            if not written:
                logfire.warn(
                    "Reaction changed concurrently",
                    content_id=str(content_id),
                    account_id=str(account_id),
                    transition=str(transition),
                )
                raise ConflictError(
                    "Reaction", f"{content_id}:{account_id}", transition=transition
                )

            await self.content_repository.adjust_counters(
                content_id,
                like_delta=transition.like_delta,
                dislike_delta=transition.dislike_delta,
            )

            logfire.info(
                "Reaction applied",
                content_id=str(content_id),
                account_id=str(account_id),
                transition=str(transition),
            )
            return transition

    async def reactions_for_items(
        self, account_id: AccountId, content_ids: Sequence[ContentId]
    ) -> dict[ContentId, ReactionState]:
        """Map each content item to the account's reaction on it.

        Args:
            account_id: Viewing account
            content_ids: Items being displayed

        Returns:
            Dictionary mapping every requested item ID to a reaction state
        """
        if not content_ids:
            return {}

        # Batch query to avoid N+1
        reactions = await self.reaction_repository.find_by_account_and_contents(
            account_id, content_ids
        )
        by_content = {reaction.content_id: reaction.state for reaction in reactions}
        return {cid: by_content.get(cid, ReactionState.NONE) for cid in content_ids}

    @staticmethod
    def parse_kind(desired: ReactionKind | str) -> ReactionKind:
        """Parse a reaction kind, case-insensitively.

        Raises:
            InvalidInputError: If desired is not a known reaction
        """
        if isinstance(desired, ReactionKind):
            return desired
        try:
            return ReactionKind(str(desired).lower())
        except ValueError:
            raise InvalidInputError(
                f"Unknown reaction '{desired}', expected one of "
                f"{[kind.value for kind in ReactionKind]}"
            )
