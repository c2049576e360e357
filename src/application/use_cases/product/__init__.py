"""Product use cases."""

from .create_product import CreateProductUseCase
from .get_product import GetProductUseCase
from .get_all_products import GetAllProductsUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase
from .restore_product import RestoreProductUseCase

__all__ = [
    "CreateProductUseCase",
    "GetProductUseCase",
    "GetAllProductsUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "RestoreProductUseCase",
]
