"""Builds small arc files in memory for the tests"""

import gzip
import os.path

FILEDESC_CONTENT = (b'1 0 InternetArchive\n'
                    b'URL IP-address Archive-date Content-type Archive-length\n')

PAYLOAD = (b'HTTP/1.1 200 OK\r\n'
           b'Content-Type: text/html\r\n'
           b'Content-Length: 12\r\n'
           b'\r\n'
           b'<p>hello</p>')


def filedesc(name, date=b'20131113000000'):
    header = b' '.join([b'filedesc://' + name, b'0.0.0.0', date, b'text/plain',
                        str(len(FILEDESC_CONTENT)).encode('ascii')])
    return header + b'\n' + FILEDESC_CONTENT + b'\n'


def arc_record(url, date, mime, content=PAYLOAD, ip=b'192.168.1.1'):
    header = b' '.join([url, ip, date, mime, str(len(content)).encode('ascii')])
    return header + b'\n' + content + b'\n'


def arc_bytes(name, records):
    """records is a list of (url, date, mime) tuples"""
    return filedesc(name) + b''.join(arc_record(*r) for r in records)


def arc_gz_bytes(name, records):
    """Same as arc_bytes, but each record is its own gzip member"""
    members = [filedesc(name)] + [arc_record(*r) for r in records]
    return b''.join(gzip.compress(m) for m in members)


def write_arc(directory, name, records, compress=False):
    path = os.path.join(directory, name)
    data = arc_gz_bytes if compress else arc_bytes
    with open(path, 'wb') as fh:
        fh.write(data(name.encode('ascii'), records))
    return path
