"""
Tests for the Animation State Resolver.

Default config: 3 s animation @ 60 fps (180 frames), 143 stars,
20 stargazers, 128 px avatars with 16 px gaps, 1280 px wide video.
"""

import math
from dataclasses import replace

import pytest

from engine.frame_sampler import FrameSampler
from engine.resolver import (
    AnimationStateResolver,
    avatar_left,
    avatar_scale,
    avatar_slot,
    build_timeline,
    calculate_metadata,
    resolve_visual_state,
    round_half_up,
    scroll_offset,
    star_count,
    star_scale,
)
from engine.timeline import Timeline
from models.errors import InvalidRangeError
from models.timeline import EntityTimingWindow, TimelineEntry

DURATION = 180
SCROLL_TARGET = -20 * 128 + 1280 * 2 / 3


class TestStarCount:
    """Counter from stars - N up to stars."""

    def test_scenario(self, config):
        """123 at frame 0, 143 at the end, strictly between in the middle."""
        assert star_count(config, 0) == 123
        assert star_count(config, DURATION) == 143
        assert 123 < star_count(config, 90) < 143

    def test_clamped_after_animation(self, config):
        """The count holds at stars once the animation is over."""
        for frame in range(DURATION, DURATION + 300):
            assert star_count(config, frame) == 143

    def test_never_decreases(self, config):
        """The count only ever goes up over integer frames."""
        counts = [star_count(config, f) for f in range(0, DURATION + 1)]
        assert counts == sorted(counts)

    def test_fractional_frames_never_decrease(self, config):
        """Sub-frame sampling is monotonic too."""
        counts = [star_count(config, f / 4) for f in range(0, 4 * DURATION + 1)]
        assert counts == sorted(counts)

    def test_negative_frames_extend_below_start(self, config):
        """Frames before 0 are not clamped on the left."""
        assert star_count(config, -30) < 123

    def test_negative_lower_bound_not_clamped(self, make_config):
        """Fewer stars than stargazers counts up from below zero."""
        config = make_config(stars=5)
        assert star_count(config, 0) == -15
        assert star_count(config, DURATION) == 5

    def test_no_stargazers_constant(self, make_config):
        """With no stargazers the count never moves."""
        config = make_config(stargazers=[])
        assert {star_count(config, f) for f in range(0, 200, 10)} == {143}

    def test_zero_length_animation_rejected(self, config):
        """A zero-frame animation is a degenerate range, not a silent fix."""
        broken = replace(config, animation_duration_frames=0)
        with pytest.raises(InvalidRangeError):
            star_count(broken, 10)


class TestAvatarLayout:
    """Slot offsets plus the shared elastic scroll."""

    def test_slots(self, config):
        """Slot i sits at gap + i * (size + gap)."""
        assert avatar_slot(config, 0) == 16
        assert avatar_slot(config, 3) == 16 + 3 * 144

    def test_no_scroll_at_start(self, config):
        """At frame 0 avatars rest in their slots."""
        assert avatar_left(config, 0, 0) == 16
        assert avatar_left(config, 3, 0) == 448

    def test_scroll_target_at_end(self, config):
        """The row ends at -N * size + two thirds of the width."""
        assert scroll_offset(config, DURATION) == pytest.approx(SCROLL_TARGET)
        assert avatar_left(config, 0, DURATION) == pytest.approx(16 + SCROLL_TARGET)

    def test_scroll_clamped_after_end(self, config):
        """The scroll holds after the animation."""
        assert scroll_offset(config, DURATION + 500) == scroll_offset(config, DURATION)

    def test_scroll_overshoots_target(self, config):
        """The elastic ease swings past the target before settling."""
        offsets = [scroll_offset(config, f) for f in range(0, DURATION + 1)]
        assert min(offsets) < SCROLL_TARGET

    def test_scroll_shared_by_all_avatars(self, config):
        """Every avatar moves by the same offset on a given frame."""
        for frame in (0, 45, 90, 135):
            deltas = {
                round(avatar_left(config, i, frame) - avatar_slot(config, i), 9)
                for i in range(config.entity_count)
            }
            assert len(deltas) == 1


class TestAvatarScale:
    """Spring pop-in on each stargazer's local clock."""

    def test_first_avatar_already_growing_at_frame_zero(self, config):
        """The pre-roll makes the first avatar visible on frame 0."""
        assert 0 < avatar_scale(config, 0, 0)

    def test_late_avatar_not_started(self, config):
        """The last avatar and its star are still at 0 on frame 0."""
        assert avatar_scale(config, 19, 0) == 0
        assert star_scale(config, 19, 0) == 0

    def test_all_settled_at_end(self, config):
        """Every spring has converged by the last animation frame."""
        for index in range(config.entity_count):
            assert avatar_scale(config, index, DURATION) == pytest.approx(1, abs=1e-3)

    def test_star_follows_avatar(self, config):
        """A star pops in with its avatar."""
        for frame in range(0, DURATION, 7):
            assert star_scale(config, 4, frame) == avatar_scale(config, 4, frame)

    def test_scale_bounded(self, config):
        """Scales stay in [0, 1.8) on every frame."""
        for frame in range(0, DURATION + 1):
            for index in range(config.entity_count):
                assert 0 <= avatar_scale(config, index, frame) < 1.8


class TestResolveVisualState:
    """Facade output."""

    def test_shape(self, config):
        """One avatar per stargazer, in order, with its image ref."""
        state = resolve_visual_state(config, 90)
        assert state.frame == 90
        assert len(state.avatars) == 20
        assert [a.index for a in state.avatars] == list(range(20))
        assert [a.image_ref for a in state.avatars] == list(config.stargazer_image_refs)

    def test_matches_component_functions(self, config):
        """The facade agrees with the per-property functions."""
        state = resolve_visual_state(config, 77)
        assert state.star_count == star_count(config, 77)
        for avatar in state.avatars:
            assert avatar.left == pytest.approx(avatar_left(config, avatar.index, 77))
            assert avatar.avatar_scale == avatar_scale(config, avatar.index, 77)
            assert avatar.avatar_size == round_half_up(128 * avatar.avatar_scale)

    def test_deterministic(self, config):
        """Same config and frame, same state."""
        for frame in (0, 1, 59, 90, 180, 400):
            assert resolve_visual_state(config, frame) == resolve_visual_state(config, frame)

    def test_negative_frame_not_rejected(self, config):
        """Frames before 0 resolve, with the count below stars - N."""
        state = resolve_visual_state(config, -30)
        assert state.star_count == star_count(config, -30) < 123
        assert state.avatars[0].visible

    def test_visibility_follows_sequence_start(self, config):
        """An avatar is visible from its own start frame on."""
        state = resolve_visual_state(config, 0)
        assert state.avatars[0].visible
        assert not state.avatars[19].visible
        assert all(a.visible for a in resolve_visual_state(config, DURATION).avatars)

    def test_star_scales(self, config):
        """star_scales lists each avatar's star in index order."""
        state = resolve_visual_state(config, 30)
        assert state.star_scales == tuple(a.star_scale for a in state.avatars)

    def test_to_dict(self, config):
        """camelCase keys for renderers."""
        data = resolve_visual_state(config, DURATION).to_dict()
        assert data["starCount"] == 143
        assert data["avatars"][0]["imageRef"] == "stargazer-1"
        assert set(data["avatars"][0]) == {
            "index", "imageRef", "left", "avatarScale", "starScale", "avatarSize", "visible"
        }


class TestMetadata:
    """Per-job derived metadata."""

    def test_defaults(self, config):
        """3 s @ 60 fps, 1280x720."""
        metadata = calculate_metadata(config)
        assert metadata.duration_in_frames == 180
        assert metadata.width == 1280
        assert metadata.height == 720
        assert metadata.fps == 60

    def test_video_longer_than_animation(self, make_config):
        """Frame count follows the video duration, not the animation's."""
        metadata = calculate_metadata(make_config(durationInSeconds=5, fps=30))
        assert metadata.duration_in_frames == 150


class TestTimelineComposition:
    """Visual state is evaluated through build_timeline's flat entries."""

    def test_entries(self, config):
        """Global tracks first, then one entry per stargazer."""
        timeline = build_timeline(config)
        names = [e.name for e in timeline.entries]
        assert names[:2] == ["star_count", "scroll"]
        assert names[2:] == [f"avatar[{i}]" for i in range(20)]

    def test_global_tracks_always_active(self, config):
        """Count and scroll are active before frame 0, on the global clock."""
        timeline = build_timeline(config)
        for name in ("star_count", "scroll"):
            entry = timeline.get(name)
            assert entry.window_start == -math.inf
            assert entry.clock_origin == 0
        assert timeline.evaluate(-30)["star_count"] == star_count(config, -30)

    def test_avatar_entries_start_at_sequence_start(self, config):
        """avatar[i] opens at stargazer i's sequence start."""
        timeline = build_timeline(config)
        resolver = AnimationStateResolver(config)
        for index in (0, 7, 19):
            assert timeline.get(f"avatar[{index}]").window_start == resolver.window(index).sequence_start

    def test_state_comes_from_timeline(self, config):
        """resolve_visual_state reads values from the timeline it is given."""
        timeline = Timeline([
            TimelineEntry("star_count", -math.inf, lambda f: 7, origin=0),
            TimelineEntry("scroll", -math.inf, lambda f: -100.0, origin=0),
            TimelineEntry("avatar[0]", 0, lambda f: 0.5),
        ])
        state = resolve_visual_state(config, 10, timeline)

        assert state.star_count == 7
        assert state.avatars[0].left == 16 - 100.0
        assert state.avatars[0].avatar_scale == 0.5
        assert state.avatars[0].avatar_size == 64
        assert state.avatars[1].avatar_scale == 0
        assert not state.avatars[1].visible

    def test_shared_timeline_same_state(self, config):
        """Passing a prebuilt timeline gives the same state as building one."""
        timeline = build_timeline(config)
        for frame in (-10, 0, 45, 180, 300):
            assert resolve_visual_state(config, frame, timeline) == resolve_visual_state(config, frame)

    def test_matches_resolver(self, config):
        """Raw timeline values match the resolved state."""
        resolver = AnimationStateResolver(config)
        for frame in (0, 30, 90, 180, 240):
            values = resolver.evaluate_timeline(frame)
            state = resolver.resolve(frame)
            assert values["star_count"] == state.star_count
            assert values["scroll"] == pytest.approx(state.avatars[0].left - 16)
            for avatar in state.avatars:
                key = f"avatar[{avatar.index}]"
                if avatar.visible:
                    assert values[key] == avatar.avatar_scale
                else:
                    assert key not in values

    def test_resolver_window(self, config):
        """The resolver exposes per-stargazer windows and job metadata."""
        resolver = AnimationStateResolver(config)
        window = resolver.window(0)
        assert isinstance(window, EntityTimingWindow)
        assert window.sequence_start == -30
        assert resolver.metadata.duration_in_frames == 180


class TestFrameSampler:
    """Batch evaluation, sequential and threaded."""

    def test_frames_cover_video(self, config):
        """One frame index per video frame."""
        assert list(FrameSampler(config).frames()) == list(range(180))

    def test_parallel_matches_sequential(self, config):
        """Thread pool results equal sequential results, duplicates included."""
        sampler = FrameSampler(config)
        frames = list(reversed(range(0, 200, 3))) + [90, 90]
        assert sampler.sample_parallel(frames, max_workers=4) == sampler.sample(frames)

    def test_results_in_request_order(self, config):
        """Results follow the requested order, not completion order."""
        states = FrameSampler(config).sample_parallel([180, 0, 90], max_workers=3)
        assert [s.frame for s in states] == [180, 0, 90]

    def test_invalid_workers(self, config):
        """A pool needs at least one worker."""
        with pytest.raises(ValueError):
            FrameSampler(config).sample_parallel([0], max_workers=0)
