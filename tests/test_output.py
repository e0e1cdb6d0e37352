import io

from axfrscope.axfr import HostnameWriter


def test_write_strips_root_dot_and_counts():
    stream = io.StringIO()
    writer = HostnameWriter(stream)

    writer.write('host.example.com.')
    writer.write('plain.example.com')

    assert stream.getvalue() == 'host.example.com\nplain.example.com\n'
    assert writer.count == 2


def test_defaults_to_stdout(capsys):
    HostnameWriter().write('www.example.com.')

    assert capsys.readouterr().out == 'www.example.com\n'
