"""Unit tests for ContentInteractionService."""

import asyncio
from decimal import Decimal
from uuid import uuid4

import logfire
import pytest

from portal.domain.error import (
    ConflictError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from portal.domain.repository import (
    AccountRepository,
    AwardRepository,
    CommentRepository,
    ContentRepository,
    ReactionRepository,
)
from portal.domain.service import ContentInteractionService, ReactionLedger
from portal.domain.value import AccountId, ContentId, ReactionKind, ReactionState
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env, owner_points=0):
    account_repo = await unit_env.get(AccountRepository)
    content_repo = await unit_env.get(ContentRepository)
    owner = await account_repo.save(make_account(points=owner_points, full_name="Owner"))
    reactor = await account_repo.save(make_account(full_name="Reactor"))
    content = await content_repo.save(make_content(owner))
    return owner, reactor, content


async def _points(unit_env, account_id) -> Decimal:
    account_repo = await unit_env.get(AccountRepository)
    return (await account_repo.find_by_id(account_id)).points


async def _yield_after_reaction_read(monkeypatch, reaction_repo):
    """Make every reaction read hand control to other tasks before returning."""
    real_find = reaction_repo.find

    async def find(content_id, account_id):
        reaction = await real_find(content_id, account_id)
        await asyncio.sleep(0)
        return reaction

    monkeypatch.setattr(reaction_repo, "find", find)


class TestToggleReaction:
    """Tests for toggling reactions through the facade."""

    @pytest.mark.asyncio
    async def test_like_switch_and_toggle_off_move_owner_balance(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, reactor, content = await _seed(unit_env)

        liked = await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)
        assert liked.state is ReactionState.LIKE
        assert liked.creator_delta == Decimal("1")
        assert await _points(unit_env, owner.id) == Decimal("1")

        switched = await service.toggle_reaction(
            content.id, reactor.id, ReactionKind.DISLIKE
        )
        assert switched.previous_state is ReactionState.LIKE
        assert switched.state is ReactionState.DISLIKE
        assert (switched.like_count, switched.dislike_count) == (0, 1)
        assert await _points(unit_env, owner.id) == Decimal("-1")

        cleared = await service.toggle_reaction(
            content.id, reactor.id, ReactionKind.DISLIKE
        )
        assert cleared.state is ReactionState.NONE
        assert (cleared.like_count, cleared.dislike_count) == (0, 0)
        assert await _points(unit_env, owner.id) == Decimal("0")

    @pytest.mark.asyncio
    async def test_reactor_balance_never_changes(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        _, reactor, content = await _seed(unit_env)

        await service.toggle_reaction(content.id, reactor.id, "like")
        await service.toggle_reaction(content.id, reactor.id, "dislike")

        assert await _points(unit_env, reactor.id) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", [ReactionKind.LIKE, ReactionKind.DISLIKE])
    async def test_same_reaction_twice_restores_everything(self, unit_env, kind):
        service = await unit_env.get(ContentInteractionService)
        content_repo = await unit_env.get(ContentRepository)
        owner, reactor, content = await _seed(unit_env, owner_points=12)

        await service.toggle_reaction(content.id, reactor.id, kind)
        outcome = await service.toggle_reaction(content.id, reactor.id, kind)

        stored = await content_repo.find_by_id(content.id)
        assert outcome.state is ReactionState.NONE
        assert (stored.like_count, stored.dislike_count) == (0, 0)
        assert stored.points_earned == 0
        assert await _points(unit_env, owner.id) == Decimal("12")

    @pytest.mark.asyncio
    async def test_switching_back_and_forth_is_symmetric(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, reactor, content = await _seed(unit_env)

        await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)
        await service.toggle_reaction(content.id, reactor.id, ReactionKind.DISLIKE)
        outcome = await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        assert outcome.state is ReactionState.LIKE
        assert outcome.creator_delta == Decimal("2")
        assert await _points(unit_env, owner.id) == Decimal("1")

    @pytest.mark.asyncio
    async def test_owner_liking_own_item_earns_nothing(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, _, content = await _seed(unit_env)

        outcome = await service.toggle_reaction(content.id, owner.id, ReactionKind.LIKE)

        assert outcome.state is ReactionState.LIKE
        assert outcome.like_count == 1
        assert outcome.creator_delta == 0
        assert await _points(unit_env, owner.id) == 0

    @pytest.mark.asyncio
    async def test_repeated_request_key_is_answered_without_reapplying(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, reactor, content = await _seed(unit_env)

        first = await service.toggle_reaction(
            content.id, reactor.id, ReactionKind.LIKE, request_key="tap-1"
        )
        retry = await service.toggle_reaction(
            content.id, reactor.id, ReactionKind.LIKE, request_key="tap-1"
        )

        assert not first.replayed
        assert retry.replayed
        assert retry.state is ReactionState.LIKE
        assert retry.like_count == 1
        assert retry.creator_delta == 0
        assert await _points(unit_env, owner.id) == Decimal("1")

    @pytest.mark.asyncio
    async def test_lost_race_to_same_state_is_absorbed(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        ledger = await unit_env.get(ReactionLedger)
        owner, reactor, content = await _seed(unit_env)
        attempts = []

        async def lose_insert(reaction):
            attempts.append(reaction)
            return False

        async def winner_state(content_id, account_id):
            return ReactionState.LIKE

        monkeypatch.setattr(reaction_repo, "insert_if_absent", lose_insert)
        monkeypatch.setattr(ledger, "current_reaction", winner_state)

        outcome = await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        assert outcome.replayed
        assert outcome.state is ReactionState.LIKE
        assert len(attempts) == 1
        assert await _points(unit_env, owner.id) == 0

    @pytest.mark.asyncio
    async def test_lost_race_retries_and_then_applies(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        owner, reactor, content = await _seed(unit_env)
        real_insert = reaction_repo.insert_if_absent
        calls = []

        async def flaky_insert(reaction):
            calls.append(reaction)
            if len(calls) == 1:
                return False
            return await real_insert(reaction)

        monkeypatch.setattr(reaction_repo, "insert_if_absent", flaky_insert)

        outcome = await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        assert len(calls) == 2
        assert outcome.state is ReactionState.LIKE
        assert outcome.like_count == 1
        assert await _points(unit_env, owner.id) == Decimal("1")

    @pytest.mark.asyncio
    async def test_conflict_surfaces_after_bounded_retries(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        content_repo = await unit_env.get(ContentRepository)
        owner, reactor, content = await _seed(unit_env)
        calls = []

        async def always_lose(reaction):
            calls.append(reaction)
            return False

        monkeypatch.setattr(reaction_repo, "insert_if_absent", always_lose)

        with pytest.raises(ConflictError):
            await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        stored = await content_repo.find_by_id(content.id)
        assert len(calls) == service.max_conflict_retries + 1
        assert stored.like_count == 0
        assert await _points(unit_env, owner.id) == 0

    @pytest.mark.asyncio
    async def test_cancelled_toggle_leaves_no_partial_state(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        content_repo = await unit_env.get(ContentRepository)
        award_repo = await unit_env.get(AwardRepository)
        ledger = await unit_env.get(ReactionLedger)
        owner, reactor, content = await _seed(unit_env)

        async def cancelled(*args, **kwargs):
            raise asyncio.CancelledError()

        monkeypatch.setattr(
            service.contribution_awarder, "award_for_transition", cancelled
        )

        with pytest.raises(asyncio.CancelledError):
            await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        stored = await content_repo.find_by_id(content.id)
        assert await ledger.current_reaction(content.id, reactor.id) is ReactionState.NONE
        assert stored.like_count == 0
        assert award_repo.all() == []
        assert await _points(unit_env, owner.id) == 0

    @pytest.mark.asyncio
    async def test_failed_toggle_keeps_concurrent_toggle(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        content_repo = await unit_env.get(ContentRepository)
        award_repo = await unit_env.get(AwardRepository)
        ledger = await unit_env.get(ReactionLedger)
        account_repo = await unit_env.get(AccountRepository)
        owner, first, content = await _seed(unit_env)
        second = await account_repo.save(make_account(full_name="Second Reactor"))
        await _yield_after_reaction_read(monkeypatch, reaction_repo)
        real_award = service.contribution_awarder.award_for_transition

        async def award(content, transition, event_key):
            if transition.account_id == second.id:
                raise RuntimeError("award store unavailable")
            return await real_award(content, transition, event_key)

        monkeypatch.setattr(service.contribution_awarder, "award_for_transition", award)

        results = await asyncio.gather(
            service.toggle_reaction(content.id, first.id, ReactionKind.LIKE),
            service.toggle_reaction(content.id, second.id, ReactionKind.LIKE),
            return_exceptions=True,
        )

        stored = await content_repo.find_by_id(content.id)
        assert results[0].state is ReactionState.LIKE
        assert isinstance(results[1], RuntimeError)
        assert await ledger.current_reaction(content.id, first.id) is ReactionState.LIKE
        assert await ledger.current_reaction(content.id, second.id) is ReactionState.NONE
        assert stored.like_count == 1
        assert await _points(unit_env, owner.id) == Decimal("1")
        assert len(award_repo.all()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_like_applies_once(self, unit_env, monkeypatch):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        content_repo = await unit_env.get(ContentRepository)
        award_repo = await unit_env.get(AwardRepository)
        ledger = await unit_env.get(ReactionLedger)
        owner, reactor, content = await _seed(unit_env)
        await _yield_after_reaction_read(monkeypatch, reaction_repo)

        outcomes = await asyncio.gather(
            service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE),
            service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE),
        )

        stored = await content_repo.find_by_id(content.id)
        assert sorted(outcome.replayed for outcome in outcomes) == [False, True]
        assert all(outcome.state is ReactionState.LIKE for outcome in outcomes)
        assert await ledger.current_reaction(content.id, reactor.id) is ReactionState.LIKE
        assert stored.like_count == 1
        assert await _points(unit_env, owner.id) == Decimal("1")
        assert len(award_repo.all()) == 1

    @pytest.mark.asyncio
    async def test_retry_warning_not_logged_for_final_attempt(
        self, unit_env, monkeypatch
    ):
        service = await unit_env.get(ContentInteractionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        _, reactor, content = await _seed(unit_env)
        logged = []

        async def always_lose(reaction):
            return False

        def record(level):
            def log(message, *args, **kwargs):
                logged.append((level, message))

            return log

        monkeypatch.setattr(reaction_repo, "insert_if_absent", always_lose)
        monkeypatch.setattr(logfire, "warn", record("warn"))
        monkeypatch.setattr(logfire, "error", record("error"))

        with pytest.raises(ConflictError):
            await service.toggle_reaction(content.id, reactor.id, ReactionKind.LIKE)

        retries = [entry for entry in logged if entry == ("warn", "Conflict, retrying")]
        assert len(retries) == service.max_conflict_retries
        assert logged[-1] == ("error", "Conflict retries exhausted")

    @pytest.mark.asyncio
    async def test_missing_account_rejected_without_side_effects(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        content_repo = await unit_env.get(ContentRepository)
        award_repo = await unit_env.get(AwardRepository)
        owner, _, content = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.toggle_reaction(
                content.id, AccountId(uuid4()), ReactionKind.LIKE
            )

        stored = await content_repo.find_by_id(content.id)
        assert stored.like_count == 0
        assert award_repo.all() == []
        assert await _points(unit_env, owner.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_reaction_rejected(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        _, reactor, content = await _seed(unit_env)

        with pytest.raises(InvalidInputError):
            await service.toggle_reaction(content.id, reactor.id, "love")

    @pytest.mark.asyncio
    async def test_missing_content(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        _, reactor, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.toggle_reaction(
                ContentId(uuid4()), reactor.id, ReactionKind.LIKE
            )


class TestPostComment:
    """Tests for posting comments through the facade."""

    @pytest.mark.asyncio
    async def test_comment_awards_commenter_and_owner(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        content_repo = await unit_env.get(ContentRepository)
        owner, commenter, content = await _seed(unit_env)

        outcome = await service.post_comment(
            content.id, commenter.id, "  Could you upload part two?  "
        )

        stored = await content_repo.find_by_id(content.id)
        assert outcome.comment.text == "Could you upload part two?"
        assert outcome.author_delta == Decimal("1")
        assert outcome.author_balance == Decimal("1")
        assert outcome.owner_delta == Decimal("1")
        assert await _points(unit_env, owner.id) == Decimal("1")
        assert stored.comment_count == 1
        assert stored.points_earned == outcome.owner_delta

    @pytest.mark.asyncio
    async def test_each_comment_is_awarded(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, commenter, content = await _seed(unit_env)

        await service.post_comment(content.id, commenter.id, "First")
        await service.post_comment(content.id, commenter.id, "Second")

        assert await _points(unit_env, commenter.id) == Decimal("2")
        assert await _points(unit_env, owner.id) == Decimal("2")

    @pytest.mark.asyncio
    async def test_owner_comment_gets_no_owner_award(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, _, content = await _seed(unit_env)

        outcome = await service.post_comment(content.id, owner.id, "Fixed a typo")

        assert outcome.owner_delta == 0
        assert await _points(unit_env, owner.id) == Decimal("1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "x" * 5001])
    async def test_invalid_text_rejected_without_side_effects(self, unit_env, text):
        service = await unit_env.get(ContentInteractionService)
        comment_repo = await unit_env.get(CommentRepository)
        _, commenter, content = await _seed(unit_env)

        with pytest.raises(InvalidInputError):
            await service.post_comment(content.id, commenter.id, text)

        assert await comment_repo.find_by_content(content.id) == []
        assert await _points(unit_env, commenter.id) == 0

    @pytest.mark.asyncio
    async def test_missing_content(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        _, commenter, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.post_comment(ContentId(uuid4()), commenter.id, "Hello")


class TestRecordUpload:
    """Tests for upload awards through the facade."""

    @pytest.mark.asyncio
    async def test_upload_awarded_once(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, _, content = await _seed(unit_env)

        first = await service.record_upload(content.id, owner.id)
        retry = await service.record_upload(content.id, owner.id)

        assert first.awarded
        assert first.delta == Decimal("5")
        assert not retry.awarded
        assert retry.balance == Decimal("5")
        assert await _points(unit_env, owner.id) == Decimal("5")

    @pytest.mark.asyncio
    async def test_only_owner_can_claim(self, unit_env):
        service = await unit_env.get(ContentInteractionService)
        owner, other, content = await _seed(unit_env)

        with pytest.raises(NotAuthorizedError):
            await service.record_upload(content.id, other.id)

        assert await _points(unit_env, other.id) == 0
        assert await _points(unit_env, owner.id) == 0
