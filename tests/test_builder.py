from conftest import noun, period

from rsvp_segmenter.services.segmentation.builder import ChunkBuilder, build_raw_chunks
from rsvp_segmenter.services.segmentation.normalizer import normalize_settings
from rsvp_segmenter.services.tokenizer.base import Token

SETTINGS = normalize_settings({"max_segment_chars": 16, "min_join_length": 4})


def texts(chunks):
    return [c.text for c in chunks]


def test_soft_break_threshold_derived_from_max():
    assert ChunkBuilder(SETTINGS).soft_break_threshold == 5


def test_flushes_before_overflowing_token():
    chunks = build_raw_chunks([[noun("あいうえおかきくけこ"), noun("さしすせそたち")]], SETTINGS)
    assert texts(chunks) == ["あいうえおかきくけこ", "さしすせそたち"]


def test_hard_boundary_is_kept_even_past_maximum():
    chunks = build_raw_chunks([[noun("一二三四五六七八九十一二三四五"), Token("！？")]], SETTINGS)
    assert texts(chunks) == ["一二三四五六七八九十一二三四五！？"]
    assert len(chunks[0].text) == 17


def test_hard_boundary_closes_chunk():
    chunks = build_raw_chunks([[noun("猫"), period(), noun("犬")]], SETTINGS)
    assert texts(chunks) == ["猫。", "犬"]


def test_soft_boundary_below_threshold_does_not_close():
    chunks = build_raw_chunks([[noun("今日"), Token("が", "助詞", "格助詞"), noun("晴れ")]], SETTINGS)
    assert texts(chunks) == ["今日が晴れ"]


def test_soft_boundary_at_threshold_closes():
    chunks = build_raw_chunks(
        [[noun("明日の天気"), Token("が", "助詞", "格助詞"), noun("晴れ")]], SETTINGS
    )
    assert texts(chunks) == ["明日の天気が", "晴れ"]


def test_reaching_maximum_closes_chunk():
    chunks = build_raw_chunks([[noun("あいうえおかきく"), noun("けこさしすせそた"), noun("終")]], SETTINGS)
    assert texts(chunks) == ["あいうえおかきくけこさしすせそた", "終"]


def test_blank_surfaces_are_skipped_and_surfaces_trimmed():
    chunks = build_raw_chunks([[Token("  "), noun(" 猫 "), Token("")]], SETTINGS)
    assert texts(chunks) == ["猫"]


def test_internal_whitespace_is_collapsed():
    chunks = build_raw_chunks([[noun("a   b")]], SETTINGS)
    assert texts(chunks) == ["a b"]


def test_paragraphs_never_share_a_chunk():
    chunks = build_raw_chunks([[noun("一")], [noun("二")]], SETTINGS)
    assert texts(chunks) == ["一", "二"]
    assert [c.id for c in chunks] == [0, 1]


def test_empty_paragraphs_only_flush():
    chunks = build_raw_chunks([[noun("一")], [], None, [noun("二")]], SETTINGS)
    assert texts(chunks) == ["一", "二"]


def test_flush_on_empty_buffer_emits_nothing():
    builder = ChunkBuilder(SETTINGS)
    assert builder.flush() is None
    assert builder.chunks == []


def test_flush_resets_length_counter():
    builder = ChunkBuilder(SETTINGS)
    builder.add_token(noun("猫"))
    assert builder.buffered_length == 1
    chunk = builder.flush()
    assert chunk.text == "猫"
    assert builder.buffered_length == 0


def test_ids_are_dense_and_ordered():
    paragraphs = [[noun("あ"), period(), noun("い"), period()], [noun("う")]]
    chunks = build_raw_chunks(paragraphs, SETTINGS)
    assert [c.id for c in chunks] == list(range(len(chunks)))
    assert texts(chunks) == ["あ。", "い。", "う"]
