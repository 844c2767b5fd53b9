"""Cooldown block: fixed content, always present on training days."""

from __future__ import annotations

from program_engine.blocks.context import BlockContext
from program_engine.models.blocks import CooldownBlock
from program_engine.models.enums import COOLDOWN_ITEMS, COOLDOWN_MINUTES, BlockType


def generate_cooldown_block(ctx: BlockContext) -> CooldownBlock:
    return CooldownBlock(
        id=ctx.block_id(BlockType.COOLDOWN),
        title="Cooldown",
        estimated_duration_minutes=COOLDOWN_MINUTES,
        items=COOLDOWN_ITEMS,
    )
