import io
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/path/file object to
    uniform its properties: whatever is passed we end up with
    a binary file object. A path is opened for reading unless
    flags says otherwise, e.g. Stream(path, flags='w') to write it.'''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal file object,
        "flags" is the mode used to open a path (always binary).'''
        self._type = type(obj)
        self.flags = flags
        self._owned = False
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        '''Close only what we opened ourselves'''
        if self._owned:
            self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\' with flags \'%s\'' % (self.obj, self.flags))
        self.obj = open(self.obj, '%sb' % self.flags)
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)
        self._owned = True

    init_bytearray = init_bytes

    def init_file(self):
        if not hasattr(self.obj, 'read') and not hasattr(self.obj, 'write'):
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

    def read(self, size):
        data = self.obj.read(size)
        logger.debug('read %d bytes of %d requested' % (len(data), size))

        return data

    def write(self, data):
        return self.obj.write(data)