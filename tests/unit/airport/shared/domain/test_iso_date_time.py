from datetime import datetime, timedelta, timezone

import pytest

from airport.shared.domain import IsoDateTime


class TestIsoDateTime:
    """IsoDateTime のテスト"""

    def test_naive_datetime_is_treated_as_utc(self):
        """タイムゾーンなしの日時は UTC とみなされる"""
        dt = IsoDateTime(value=datetime(2030, 1, 1, 10, 0, 0))
        assert dt.value.tzinfo == timezone.utc
        assert str(dt) == "2030-01-01T10:00:00.000000+00:00"

    def test_offset_is_normalized_to_utc(self):
        """タイムゾーン付きの日時は UTC に変換される"""
        dt = IsoDateTime.from_string("2030-01-01T19:00:00+09:00")
        assert str(dt) == "2030-01-01T10:00:00.000000+00:00"

    def test_z_suffix_is_accepted(self):
        """末尾 Z の文字列を解釈できる"""
        assert IsoDateTime.from_string("2030-01-01T10:00:00Z") == IsoDateTime(
            value=datetime(2030, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        )

    def test_invalid_string_raises_error(self):
        """ISO 8601 でない文字列は ValueError"""
        with pytest.raises(ValueError, match="Invalid ISO 8601 datetime: tomorrow"):
            IsoDateTime.from_string("tomorrow")

    def test_of_accepts_all_input_types(self):
        """datetime / 文字列 / IsoDateTime のいずれからも生成できる"""
        expected = IsoDateTime.from_string("2030-01-01T10:00:00Z")
        assert IsoDateTime.of("2030-01-01T10:00:00Z") == expected
        assert IsoDateTime.of(datetime(2030, 1, 1, 10, 0, 0)) == expected
        assert IsoDateTime.of(expected) is expected

    def test_plus_hours_and_comparison(self):
        """時間の加算と前後比較"""
        start = IsoDateTime.from_string("2030-01-01T10:00:00Z")
        later = start.plus_hours(2)

        assert later.value - start.value == timedelta(hours=2)
        assert start.is_before(later)
        assert later.is_after(start)
        assert not start.is_after(start)

    def test_sub_second_precision_is_kept(self):
        """秒未満も文字列表現に残り、文字列比較でも前後関係が変わらない"""
        earlier = IsoDateTime.from_string("2030-01-01T10:00:00.500000Z")
        later = IsoDateTime.from_string("2030-01-01T10:00:00.700000Z")

        assert str(later) == "2030-01-01T10:00:00.700000+00:00"
        assert IsoDateTime.from_string(str(later)) == later
        assert str(earlier) < str(later)

    def test_string_form_sorts_chronologically(self):
        """文字列表現の辞書順が時刻順と一致する"""
        times = [
            IsoDateTime.from_string("2030-01-02T00:00:00Z"),
            IsoDateTime.from_string("2030-01-01T23:00:00+09:00"),
            IsoDateTime.from_string("2030-01-01T15:00:00Z"),
        ]
        assert sorted(str(t) for t in times) == [str(t) for t in sorted(times)]
