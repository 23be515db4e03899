"""Tests for concatenated multi-channel histograms."""

import numpy as np
import pytest
from PIL import Image as PILImage

from regionhist.analysis.histogram import multi_channel_histogram, scalar_histogram
from regionhist.histogram_exceptions import BinningError, InvalidRegionError
from regionhist.model import ChannelSource, NumpyChannelSource, Region


class RecordingSource:
    """Synthetic ChannelSource backed by per-channel sample lists."""

    def __init__(self, channels):
        self.channels = [np.asarray(c) for c in channels]
        self.calls = []

    @property
    def number_of_components(self):
        return len(self.channels)

    def extract_channel(self, channel):
        self.calls.append(("extract", channel))
        return self.channels[channel].reshape(1, -1)

    def pixel_values_in_region(self, channel_image, region):
        self.calls.append(("sample", str(region)))
        return channel_image.ravel()


class TestMultiChannelHistogram:
    """Concatenation and channel order."""

    def test_constant_channels(self, rgb_source):
        hist = multi_channel_histogram(rgb_source, Region(0, 0, 4, 3), 2, 0, 255)

        # channel 0 = 0, channel 1 = 128, channel 2 = 255; 12 pixels each
        assert hist.tolist() == [12.0, 0.0, 0.0, 12.0, 0.0, 12.0]

    def test_length_is_components_times_bins(self, random_image):
        source = NumpyChannelSource(random_image)

        hist = multi_channel_histogram(source, Region(2, 3, 10, 5), 16, 0, 255)

        assert len(hist) == 3 * 16
        for channel in range(3):
            assert hist[channel * 16:(channel + 1) * 16].sum() == 50

    def test_each_block_matches_scalar_histogram(self, random_image):
        source = NumpyChannelSource(random_image)
        region = Region(5, 1, 7, 9)

        hist = multi_channel_histogram(source, region, 8, 0, 255)

        for channel in range(3):
            samples = random_image[1:10, 5:12, channel]
            expected = scalar_histogram(samples, 8, 0, 255)
            np.testing.assert_array_equal(hist[channel * 8:(channel + 1) * 8], expected)

    def test_first_block_depends_only_on_channel_zero(self, random_image):
        altered = random_image.copy()
        altered[:, :, 1] = 0
        altered[:, :, 2] = 255

        original = multi_channel_histogram(NumpyChannelSource(random_image), None, 10, 0, 255)
        changed = multi_channel_histogram(NumpyChannelSource(altered), None, 10, 0, 255)

        np.testing.assert_array_equal(original[:10], changed[:10])
        assert not np.array_equal(original[10:], changed[10:])

    def test_region_limits_sampled_pixels(self):
        image = np.zeros((10, 10, 2), dtype=np.uint8)
        image[2:4, 3:6, :] = 200
        source = NumpyChannelSource(image)

        hist = multi_channel_histogram(source, Region(3, 2, 3, 2), 2, 0, 255)

        assert hist.tolist() == [0.0, 6.0, 0.0, 6.0]

    def test_none_region_samples_whole_image(self, rgb_source):
        hist = multi_channel_histogram(rgb_source, None, 1, 0, 255)

        assert hist.tolist() == [12.0, 12.0, 12.0]

    def test_empty_region_gives_zero_histogram(self, rgb_source):
        hist = multi_channel_histogram(rgb_source, Region(1, 1, 0, 0), 2, 0, 255)

        assert hist.tolist() == [0.0] * 6

    def test_grayscale_image_has_one_block(self):
        image = np.array([[0, 50], [100, 150]], dtype=np.uint8)

        hist = multi_channel_histogram(NumpyChannelSource(image), None, 2, 0, 200)

        assert hist.tolist() == [2.0, 2.0]

    def test_pil_image_source(self):
        pil_image = PILImage.new("RGB", (4, 3), color=(255, 0, 10))
        source = NumpyChannelSource.from_pil(pil_image)

        hist = multi_channel_histogram(source, None, 2, 0, 255)

        assert source.number_of_components == 3
        assert hist.tolist() == [0.0, 12.0, 12.0, 0.0, 12.0, 0.0]

    def test_result_is_read_only(self, rgb_source):
        hist = multi_channel_histogram(rgb_source, None, 2, 0, 255)

        assert not hist.flags.writeable


class TestMultiChannelHistogramSource:
    """The computation only uses the ChannelSource interface."""

    def test_channels_visited_in_order(self):
        source = RecordingSource([[0, 1], [2, 3], [3, 3]])
        region = Region(0, 0, 2, 1)

        hist = multi_channel_histogram(source, region, 3, 0, 3)

        assert isinstance(source, ChannelSource)
        assert [call for call in source.calls if call[0] == "extract"] == [
            ("extract", 0),
            ("extract", 1),
            ("extract", 2),
        ]
        assert hist.tolist() == [1.0, 1.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 2.0]

    def test_no_components_gives_empty_histogram(self):
        hist = multi_channel_histogram(RecordingSource([]), None, 4, 0, 1)

        assert hist.size == 0


class TestMultiChannelHistogramErrors:
    """Failures abort the whole computation."""

    def test_out_of_range_in_later_channel_raises(self):
        source = RecordingSource([[0, 1], [0, 99], [1, 1]])

        with pytest.raises(BinningError) as exc_info:
            multi_channel_histogram(source, Region(0, 0, 2, 1), 2, 0, 1)

        assert exc_info.value.value == 99.0
        # channel 2 is never reached
        assert ("extract", 2) not in source.calls

    def test_region_outside_image_raises(self, rgb_source):
        with pytest.raises(InvalidRegionError):
            multi_channel_histogram(rgb_source, Region(2, 0, 5, 3), 2, 0, 255)

    def test_negative_origin_raises(self, rgb_source):
        with pytest.raises(InvalidRegionError):
            multi_channel_histogram(rgb_source, Region(-1, 0, 2, 2), 2, 0, 255)
