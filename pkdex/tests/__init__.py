# test support code

def blank_save(version, padding=0x200):
    """Returns a zeroed save buffer just big enough for `version`'s Pokédex,
    plus some padding.
    """
    return bytearray(version.dex_offset + version.region_length + padding)

def set_bits(buffer):
    """Returns every set bit in `buffer`, as a set of (byte, bit) pairs."""
    return set(
        (offset, bit)
        for offset, byte in enumerate(buffer) if byte
        for bit in range(8) if byte >> bit & 1
    )

class FakePersonal(object):
    """Form counts from a dict, for species we want to pretend about."""
    def __init__(self, form_counts):
        self.form_counts = form_counts

    def form_count(self, species, form=0):
        return self.form_counts.get(species, 0)
