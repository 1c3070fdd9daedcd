import contextlib
import io
import os
import os.path
import shutil
import tempfile
import unittest

from arcurls import findarcurls
from arcurls.scan.tests.arcfixtures import write_arc

RECORDS = [
    (b'http://a.com/x', b'20200101', b'text/html'),
    (b'http://b.com/y', b'20200102', b'text/html'),
]


class FindArcUrlsTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.arc = write_arc(self.tmp, 'one.arc', RECORDS)
        self.out = os.path.join(self.tmp, 'out')

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def main(self, *args):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            ret = findarcurls.main(['findarcurls'] + list(args))
        return ret, stderr.getvalue()

    def output(self):
        with open(self.out, 'rb') as fh:
            return fh.read()

    def test_writes_matches(self):
        ret, _ = self.main('-i', self.arc, '-o', self.out, '-p', r'http://a\.com/.*')
        self.assertEqual(ret, 0)
        self.assertEqual(self.output(), b'one.arc http://a.com/x text/html\t20200101\n')

    def test_long_options_and_positional_inputs(self):
        other = write_arc(self.tmp, 'two.arc', RECORDS[1:])
        ret, _ = self.main('--output', self.out, '--pattern', r'.*\.com/.', '--jobs', '2',
                           '--log-level', 'warning', self.arc, other)
        self.assertEqual(ret, 0)
        self.assertEqual(self.output(),
                         b'one.arc http://a.com/x text/html\t20200101\n'
                         b'one.arc http://b.com/y text/html\t20200102\n'
                         b'two.arc http://b.com/y text/html\t20200102\n')

    def test_comma_separated_inputs(self):
        other = write_arc(self.tmp, 'two.arc', RECORDS)
        ret, _ = self.main('-i', self.arc + ',' + other, '-o', self.out, '-p', r'http://b\.com/y')
        self.assertEqual(ret, 0)
        self.assertEqual(self.output().count(b'\n'), 2)

    def test_missing_pattern(self):
        with open(self.out, 'w') as fh:
            fh.write('previous run\n')
        ret, err = self.main('-i', self.arc, '-o', self.out)
        self.assertEqual(ret, -1)
        self.assertIn('Usage:', err)
        self.assertIn('missing pattern', err)
        # nothing ran, so nothing was cleared
        self.assertEqual(self.output(), b'previous run\n')

    def test_missing_input(self):
        ret, err = self.main('-o', self.out, '-p', '.*')
        self.assertEqual(ret, -1)
        self.assertIn('missing input', err)

    def test_missing_output(self):
        ret, err = self.main('-i', self.arc, '-p', '.*')
        self.assertEqual(ret, -1)
        self.assertIn('missing output', err)

    def test_invalid_pattern(self):
        ret, err = self.main('-i', self.arc, '-o', self.out, '-p', '[unclosed')
        self.assertEqual(ret, -1)
        self.assertIn('invalid pattern', err)
        self.assertFalse(os.path.exists(self.out))

    def test_unknown_log_level(self):
        ret, err = self.main('-i', self.arc, '-o', self.out, '-p', '.*', '-L', 'loud')
        self.assertEqual(ret, -1)
        self.assertIn('unknown log level', err)

    def test_unreadable_input(self):
        missing = os.path.join(self.tmp, 'missing.arc')
        ret, _ = self.main('-i', missing, '-o', self.out, '-p', '.*')
        self.assertEqual(ret, -1)

    def test_stdout_keeps_original_bytes(self):
        arc = write_arc(self.tmp, 'latin.arc', [
            (b'http://a.com/x', b'20200101', b'text/html'),
            (b'http://a.com/\xe9', b'20200102', b'text/html'),
        ])
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding='utf-8', errors='strict')
        with contextlib.redirect_stdout(stdout):
            ret, _ = self.main('-i', arc, '-o', '-', '-p', 'http://a.*')
        self.assertEqual(ret, 0)
        self.assertEqual(buffer.getvalue(),
                         b'latin.arc http://a.com/x text/html\t20200101\n'
                         b'latin.arc http://a.com/\xe9 text/html\t20200102\n')

    def test_refuses_to_overwrite_input(self):
        with open(self.arc, 'rb') as fh:
            before = fh.read()
        ret, err = self.main('-i', self.arc, '-o', self.arc, '-p', '.*')
        self.assertEqual(ret, -1)
        self.assertIn('would overwrite input', err)
        with open(self.arc, 'rb') as fh:
            self.assertEqual(fh.read(), before)

    def test_refuses_output_directory_holding_inputs(self):
        ret, err = self.main('-i', self.tmp, '-o', self.tmp, '-p', '.*')
        self.assertEqual(ret, -1)
        self.assertTrue(os.path.isfile(self.arc))

    def test_output_inside_input_directory(self):
        self.out = os.path.join(self.tmp, 'matches')
        for _ in range(2):
            ret, _ = self.main('-i', self.tmp, '-o', self.out, '-p', r'http://a\.com/.*')
            self.assertEqual(ret, 0)
            self.assertEqual(self.output(), b'one.arc http://a.com/x text/html\t20200101\n')

    def test_logs_record_count(self):
        with self.assertLogs('arcurls', level='INFO') as logs:
            ret, _ = self.main('-i', self.arc, '-o', self.out, '-p', '.*')
        self.assertEqual(ret, 0)
        self.assertIn('Read 3 records.', [r.getMessage() for r in logs.records])


if __name__ == '__main__':
    unittest.main()
