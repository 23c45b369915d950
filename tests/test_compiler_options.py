import unittest

import sassbind_core
from sassbind_core import OutputStyle

from tests.fake_native import make_context


class CompilerOptionsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.context, self.native = make_context()
        self.options = self.context.create_options()

    def tearDown(self) -> None:
        self.options.dispose()

    def test_precision_round_trip(self) -> None:
        for value in (0, 5, 8, 10, 1000):
            self.options.precision = value
            self.assertEqual(self.options.precision, value)

    def test_precision_rejects_negative_and_non_int(self) -> None:
        for bad in (-1, "8", 8.5, True):
            with self.assertRaises(sassbind_core.InvalidPrecisionError):
                self.options.precision = bad
        self.assertNotIn("set_precision", self.native.calls)

    def test_output_style_accepts_enum_and_ordinal(self) -> None:
        self.options.output_style = OutputStyle.COMPACT
        self.assertIs(self.options.output_style, OutputStyle.COMPACT)
        self.options.output_style = 3
        self.assertIs(self.options.output_style, OutputStyle.COMPRESSED)

    def test_output_style_out_of_range_is_not_forwarded(self) -> None:
        with self.assertRaises(sassbind_core.InvalidStyleError):
            self.options.output_style = 7
        self.assertNotIn("set_output_style", self.native.calls)

    def test_flags_forward_to_native(self) -> None:
        self.options.source_comments = True
        self.options.omit_map_comment = True
        self.options.indented_syntax = True
        state = self.native.store[self.options.handle]
        self.assertTrue(state.source_comments)
        self.assertTrue(state.omit_map_comment)
        self.assertTrue(state.indented_syntax)
        self.assertTrue(self.options.source_comments)
        self.options.indented_syntax = False
        self.assertFalse(self.options.indented_syntax)

    def test_paths_append(self) -> None:
        self.options.add_include_path("scss")
        self.options.add_include_path("vendor/scss")
        self.options.add_plugin_path("plugins")
        self.assertEqual(self.options.include_paths, ("scss", "vendor/scss"))
        self.assertEqual(self.options.plugin_path, "plugins")

    def test_empty_path_rejected(self) -> None:
        with self.assertRaises(sassbind_core.InvalidOptionError) as ctx:
            self.options.add_include_path("")
        self.assertEqual(ctx.exception.key, "includePath")
        with self.assertRaises(sassbind_core.InvalidOptionError) as ctx:
            self.options.add_plugin_path("")
        self.assertEqual(ctx.exception.key, "pluginPath")
        with self.assertRaises(sassbind_core.SassBindError):
            self.options.add_include_path(None)
        self.assertEqual(self.options.include_paths, ())

    def test_unknown_native_style_ordinal(self) -> None:
        # libsass also defines SASS_STYLE_INSPECT (4) and SASS_STYLE_TO_SASS (5).
        self.native.store[self.options.handle].output_style = 4
        with self.assertRaises(sassbind_core.SassBindError) as ctx:
            self.options.output_style
        self.assertNotIsInstance(ctx.exception, sassbind_core.InvalidStyleError)
        self.assertIn("native style ordinal 4", str(ctx.exception))

    def test_dispose_is_idempotent(self) -> None:
        handle = self.options.handle
        self.options.dispose()
        self.options.dispose()
        self.assertTrue(self.options.disposed)
        self.assertEqual(self.native.deleted, [handle])

    def test_dispose_twice_leaves_other_instances_alone(self) -> None:
        other = self.context.create_options()
        other.precision = 7
        self.options.dispose()
        self.options.dispose()
        self.assertEqual(other.precision, 7)
        other.dispose()

    def test_use_after_dispose_rejected(self) -> None:
        self.options.dispose()
        accessors = [
            lambda o: o.precision,
            lambda o: setattr(o, "precision", 3),
            lambda o: o.output_style,
            lambda o: setattr(o, "output_style", OutputStyle.EXPANDED),
            lambda o: setattr(o, "source_comments", True),
            lambda o: setattr(o, "omit_map_comment", True),
            lambda o: setattr(o, "indented_syntax", True),
            lambda o: o.add_include_path("a"),
            lambda o: o.add_plugin_path("b"),
            lambda o: o.include_paths,
            lambda o: o.handle,
        ]
        for access in accessors:
            with self.assertRaises(sassbind_core.DisposedError):
                access(self.options)
        self.assertEqual(self.native.calls.count("delete_options"), 1)

    def test_handle_isolation(self) -> None:
        other = self.context.create_options()
        try:
            self.assertNotEqual(other.handle, self.options.handle)
            before = other.precision
            self.options.precision = 2
            self.assertEqual(other.precision, before)
        finally:
            other.dispose()

    def test_with_block_disposes(self) -> None:
        with self.context.create_options() as opts:
            handle = opts.handle
            opts.precision = 4
        self.assertTrue(opts.disposed)
        self.assertIn(handle, self.native.deleted)

    def test_repr_does_not_touch_disposed_handle(self) -> None:
        self.assertIn("handle=0x", repr(self.options))
        self.options.dispose()
        self.assertEqual(repr(self.options), "<CompilerOptions disposed>")


if __name__ == "__main__":
    unittest.main(verbosity=2)
