"""Tests for follow-up button generation."""

import pytest

from web_agent.domain.prompts import Channel
from web_agent.domain.services import FollowUpService


@pytest.fixture
def windchasers(registry):
    return registry.resolve("windchasers")


class TestFollowUpCounts:
    """Test cases for how many buttons each turn gets."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message_count", [0, 1])
    async def test_first_message_gets_two_buttons(self, fake_llm, windchasers, message_count):
        """The LLM writes the lead button; the second comes from the brand pool."""
        fake_llm.replies = ["Get Course Timeline"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Hi", "Welcome!", message_count=message_count
        )

        assert buttons == ["Get Course Timeline", "Start Pilot Training"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message_count", [None, 2, 5])
    async def test_subsequent_message_gets_one_button(self, fake_llm, windchasers, message_count):
        fake_llm.replies = ["Get Course Timeline"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Tell me about CPL", "CPL takes 18 months.",
            message_count=message_count,
        )

        assert buttons == ["Get Course Timeline"]

    @pytest.mark.asyncio
    async def test_max_follow_ups_caps_buttons(self, fake_llm, windchasers):
        brand = windchasers.model_copy(update={"max_follow_ups": 1})
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(brand, Channel.WEB, "Hi", "Welcome!", message_count=1)

        assert len(buttons) == 1

    @pytest.mark.asyncio
    async def test_button_generation_prompt(self, fake_llm, windchasers):
        """The label request names the brand and is kept short."""
        service = FollowUpService(fake_llm)

        await service.generate_follow_ups(windchasers, Channel.WEB, "Hi", "Welcome!", message_count=3)

        prompt, context = fake_llm.calls[0]
        assert "User's question: Hi" in prompt
        assert "Assistant's reply: Welcome!" in prompt
        assert "Windchasers chat widget" in context["system_prompt"]
        assert context["max_tokens"] == 60


class TestFollowUpGating:
    """Test cases for when no buttons are produced."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("channel", [Channel.WHATSAPP, Channel.VOICE, Channel.SOCIAL])
    async def test_non_web_channels_get_none(self, fake_llm, windchasers, channel):
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(windchasers, channel, "Hi", "Welcome!", message_count=1)

        assert buttons == []
        assert fake_llm.calls == []

    @pytest.mark.asyncio
    async def test_disabled_for_brand(self, fake_llm, registry):
        brand = registry.resolve("bcon").model_copy(update={"show_follow_up_buttons": False})
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(brand, Channel.WEB, "Hi", "Welcome!", message_count=1)

        assert buttons == []
        assert fake_llm.calls == []


class TestFollowUpContent:
    """Test cases for which buttons are chosen."""

    @pytest.mark.asyncio
    async def test_explore_click_returns_explore_menu(self, fake_llm, windchasers):
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Explore Training Options", "Here are our programs.", message_count=1
        )

        assert buttons == list(windchasers.explore_buttons)
        assert fake_llm.calls == []

    @pytest.mark.asyncio
    async def test_explore_without_menu_uses_normal_flow(self, fake_llm, registry):
        """Brands without explore buttons fall through to generated buttons."""
        fake_llm.replies = ["Talk to the Team"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            registry.resolve("master"), Channel.WEB, "Explore options", "Sure.", message_count=4
        )

        assert buttons == ["Talk to the Team"]

    @pytest.mark.asyncio
    async def test_existing_booking_first_message(self, fake_llm, windchasers):
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Hi", "Welcome back!", message_count=1, has_existing_booking=True
        )

        assert buttons == ["Get Course Details", "Check Eligibility"]
        assert fake_llm.calls == []

    @pytest.mark.asyncio
    async def test_existing_booking_skips_used_buttons(self, fake_llm, windchasers):
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Thanks", "Anytime.", message_count=4,
            used_buttons=["Get Course Details"], has_existing_booking=True,
        )

        assert buttons == ["Check Eligibility"]

    @pytest.mark.asyncio
    async def test_skip_uses_brand_pool(self, fake_llm, windchasers):
        fake_llm.replies = ["SKIP"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(windchasers, Channel.WEB, "Hi", "Welcome!", message_count=1)

        assert buttons == ["Start Pilot Training", "Book a Demo Session"]

    @pytest.mark.asyncio
    async def test_similar_booking_buttons_not_repeated(self, fake_llm, windchasers):
        """A used demo button rules out other demo buttons."""
        fake_llm.replies = ["SKIP"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "Hi", "Welcome!", message_count=1,
            used_buttons=["Start Pilot Training", "Schedule a Demo"],
        )

        assert buttons == ["Explore Training Options", "Get Cost Breakdown"]

    @pytest.mark.asyncio
    async def test_llm_failure_falls_back_to_cost_pool(self, fake_llm, windchasers):
        fake_llm.fail = True
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            windchasers, Channel.WEB, "What does it cost?", "It varies.", message_count=3
        )

        assert buttons == ["Get Cost Breakdown"]

    @pytest.mark.asyncio
    async def test_used_generated_button_replaced(self, fake_llm, registry):
        fake_llm.replies = ["Learn More"]
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(
            registry.resolve("master"), Channel.WEB, "Tell me more", "Sure.",
            message_count=4, used_buttons=["learn more"],
        )

        assert buttons == ["What is Master?"]

    @pytest.mark.asyncio
    async def test_generated_label_cleaned(self, fake_llm, windchasers):
        fake_llm.replies = ['"Book 1:1 Consultation"\nBecause they asked about timelines.']
        service = FollowUpService(fake_llm)

        buttons = await service.generate_follow_ups(windchasers, Channel.WEB, "Hi", "Welcome!", message_count=2)

        assert buttons == ["Book 1:1 Consultation"]
