"""Block generators: one pure function per workout block type."""

from program_engine.blocks.accessory import generate_accessory_block
from program_engine.blocks.conditioning import generate_conditioning_block
from program_engine.blocks.context import BlockContext
from program_engine.blocks.cooldown import generate_cooldown_block
from program_engine.blocks.strength import generate_strength_block
from program_engine.blocks.warmup import generate_warmup_block

__all__ = [
    "BlockContext",
    "generate_accessory_block",
    "generate_conditioning_block",
    "generate_cooldown_block",
    "generate_strength_block",
    "generate_warmup_block",
]
