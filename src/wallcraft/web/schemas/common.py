"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from wallcraft.domain import Block, Position, Rect, Size, Wall


class PositionSchema(BaseModel):
    """Top-left corner in wall coordinates (cm)."""

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")

    def to_domain(self) -> Position:
        return Position(self.x, self.y)

    @classmethod
    def from_domain(cls, position: Position) -> "PositionSchema":
        return cls(x=position.x, y=position.y)


class SizeSchema(BaseModel):
    """Block dimensions (cm)."""

    width: float = Field(..., gt=0, description="Block width")
    height: float = Field(..., gt=0, description="Block height")

    def to_domain(self) -> Size:
        return Size(self.width, self.height)


class RectSchema(BaseModel):
    """Axis-aligned rectangle (cm)."""

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., gt=0, description="Width")
    height: float = Field(..., gt=0, description="Height")

    def to_domain(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class WallSpecSchema(BaseModel):
    """Wall dimensions (cm)."""

    width: float = Field(..., gt=0, description="Wall width")
    height: float = Field(..., gt=0, description="Wall height")
    background_color: str = Field(default="#f5f5f5", description="Wall colour")

    def to_domain(self) -> Wall:
        return Wall(self.width, self.height, self.background_color)


class BlockSpecSchema(BaseModel):
    """A block placed on the wall."""

    id: str = Field(..., min_length=1, description="Unique block id")
    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., gt=0, description="Block width")
    height: float = Field(..., gt=0, description="Block height")
    color: str = Field(default="#ffffff", description="Fill colour")
    texture_image: str | None = Field(default=None, description="Texture data URL")
    is_overflow: bool = Field(default=False, description="Extends past the wall")

    def to_domain(self) -> Block:
        return Block(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            id=self.id,
            color=self.color,
            texture_image=self.texture_image,
            is_overflow=self.is_overflow,
        )

    @classmethod
    def from_domain(cls, block: Block) -> "BlockSpecSchema":
        return cls(
            id=block.id,
            x=block.x,
            y=block.y,
            width=block.width,
            height=block.height,
            color=block.color,
            texture_image=block.texture_image,
            is_overflow=block.is_overflow,
        )
