from .pedersen import Pedersen, mod_exp, pedersen_commit
