from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CategoryRef(BaseModel):
    name: Optional[str] = Field(None, description="Category name")


class ProductOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store identifier")
    productId: Optional[int] = Field(None, description="Human-facing numeric id")
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    status: Optional[str] = None
    image: Optional[str] = Field(None, description="Stored image filename")
    imageUrl: Optional[str] = Field(None, description="Public URL of the image, null when there is none")
    category: Optional[CategoryRef] = None


class CategoryDetail(CategoryRef):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="Category store identifier")


class ProductDetailOut(ProductOut):
    """Single product as stored, with the referenced category populated."""
    category: Optional[CategoryDetail] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class ProductListOut(BaseModel):
    products: List[ProductOut]
    total: int
    page: int
    pages: int


class ProductRecord(BaseModel):
    """A freshly inserted product; category is the referenced category id."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    productId: int
    name: str
    description: str
    price: float
    status: str
    category: str
    image: str
    imageUrl: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class ProductCreated(BaseModel):
    success: bool = True
    message: str
    data: ProductRecord
