# -*- coding: utf-8 -*-

import pytest

from humanizer.exceptions import OutputError
from humanizer.writer import OutputSink

@pytest.mark.unit
def test_output_sink_replaces_existing_file(tmp_path):
    path = tmp_path / 'out.txt'
    path.write_text('stale\nlines\n', encoding='utf-8')

    with OutputSink(str(path)) as sink:
        sink.write('first')
        sink.write('zweiter')
        # every line is flushed immediately
        assert path.read_text(encoding='utf-8') == 'first\nzweiter\n'

    assert sink.lines_written == 2
    assert path.read_text(encoding='utf-8') == 'first\nzweiter\n'

@pytest.mark.unit
def test_output_sink_missing_directory(tmp_path):
    sink = OutputSink(str(tmp_path / 'missing' / 'out.txt'))

    with pytest.raises(OutputError) as e:
        sink.open()

    assert isinstance(e.value, OSError)
    assert e.value.path == sink.filename
    assert isinstance(e.value.cause, FileNotFoundError)
    assert sink.filename in str(e.value)

@pytest.mark.unit
def test_output_sink_write_before_open(tmp_path):
    sink = OutputSink(str(tmp_path / 'out.txt'))

    with pytest.raises(OutputError):
        sink.write('nope')

@pytest.mark.unit
def test_output_sink_close_twice(tmp_path):
    sink = OutputSink(str(tmp_path / 'out.txt'))
    sink.open()
    sink.close()
    sink.close()

    with pytest.raises(OutputError):
        sink.write('closed')

@pytest.mark.unit
def test_output_sink_delete_failure(tmp_path, monkeypatch):
    path = tmp_path / 'out.txt'
    path.write_text('locked\n', encoding='utf-8')

    def _remove(filename):
        raise PermissionError(13, 'Permission denied', filename)

    monkeypatch.setattr('humanizer.writer.os.remove', _remove)
    sink = OutputSink(str(path))

    with pytest.raises(OutputError) as e:
        sink.open()

    assert e.value.action == '删除'
    assert isinstance(e.value.cause, PermissionError)
    assert sink._file is None
    assert path.read_text(encoding='utf-8') == 'locked\n'

@pytest.mark.unit
def test_output_sink_flush_failure(tmp_path):
    path = tmp_path / 'out.txt'
    sink = OutputSink(str(path))
    sink.open()

    real_file = sink._file

    class _FullDisk:
        def write(self, data):
            return real_file.write(data)
        def flush(self):
            raise OSError(28, 'No space left on device')
        def close(self):
            real_file.close()

    sink._file = _FullDisk()

    with pytest.raises(OutputError) as e:
        sink.write('lost')

    assert e.value.action == '写入'
    assert e.value.cause.errno == 28
    assert sink.lines_written == 0
    sink.close()
    assert sink._file is None
