__version__ = "0.1.0"
__title__ = "cpzk"
__author__ = "The cpzk developers"
__license__ = "MIT"
__description__ = "Chaum-Pedersen non-interactive zero-knowledge proofs over multiplicative groups."
__copyright__ = "2020, The cpzk developers"


from cpzk.base import Proof
from cpzk.groups import MultiplicativeGroup, GroupParameters, modp_group
from cpzk.chaum_pedersen import ChaumPedersen, FromEngine, FromParameters
