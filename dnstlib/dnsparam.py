"""
DNS parameter registries used by dnst.

"""


class DNSparam:
    """Class to encapsulate a DNS parameter registry (mnemonic <-> value)"""

    def __init__(self, prefix, name2val):
        self.prefix = prefix
        self.name2val = name2val
        self.val2name = dict([(y, x) for (x, y) in name2val.items()])

    def get_name(self, val):
        """given code (value), return text name of parameter"""
        return self.val2name.get(val)

    def get_val(self, name):
        """given text name, return code (value) of parameter.
        Mnemonics are matched case sensitively."""
        return self.name2val[name]

    def is_known(self, val):
        return val in self.val2name

    def __contains__(self, name):
        return name in self.name2val

    def __repr__(self):
        return "<DNSparam: %s>" % self.prefix


# NSEC3 hash algorithms: IANA "DNSSEC NSEC3 Hash Algorithms", RFC 5155
nsec3_hash_alg = DNSparam("NSEC3HASH", {
    "SHA-1": 1,
    })
