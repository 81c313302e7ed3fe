"""Product API router: catalog CRUD and single-field updates."""

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from src.shopkart.api.http.deps import get_product_service
from src.shopkart.core.services import ProductService
from src.shopkart.entities.service.product import Product, ProductCreate

router = APIRouter(tags=["products"])


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_product(
    product: ProductCreate | None = Body(default=None),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    return service.create_product(product.to_entity() if product is not None else None)


@router.get("", response_model=list[Product])
@router.get("/", response_model=list[Product], include_in_schema=False)
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.get_all_products()


# Must be registered before /{product_id}
@router.get("/byName", response_model=Product)
def get_product_by_name(
    name: str = Query(...),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by its exact name."""
    return service.get_product_by_name(name)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    return service.get_product_by_id(product_id)


@router.put("/{product_id}/price", response_model=Product)
def update_product_price(
    product_id: int,
    price: float = Query(...),
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.update_product_price(product_id, price)


@router.put("/{product_id}/name", response_model=Product)
def update_product_name(
    product_id: int,
    name: str = Query(...),
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.update_product_name(product_id, name)


@router.put("/{product_id}/description", response_model=Product)
def update_product_description(
    product_id: int,
    description: str = Query(...),
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.update_product_description(product_id, description)


@router.put("/{product_id}/imageUrl", response_model=Product)
def update_product_image_url(
    product_id: int,
    image_url: str = Query(..., alias="imageUrl"),
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.update_product_image_url(product_id, image_url)


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> dict[str, str]:
    """Delete a product."""
    if not service.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted successfully"}
