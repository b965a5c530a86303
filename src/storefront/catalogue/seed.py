"""Local catalogue seed: the categories and products the storefront ships with."""

from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.management import AddCategory, AddProduct
from storefront.catalogue.product import Product
from storefront.domain import logger

CATEGORIES = [
    {"category_id": "1", "name": "Electronics", "slug": "electronics"},
    {"category_id": "2", "name": "Fashion", "slug": "fashion"},
    {"category_id": "3", "name": "Home & Kitchen", "slug": "home-kitchen"},
    {"category_id": "4", "name": "Books", "slug": "books"},
    {"category_id": "5", "name": "Sports", "slug": "sports"},
]

PRODUCTS = [
    {
        "product_id": "1",
        "name": "Wireless Bluetooth Headphones",
        "description": "Premium noise-cancelling headphones with 30-hour battery life",
        "price": 2999,
        "original_price": 4999,
        "category_id": "1",
        "stock": 15,
        "image_url": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=500",
        "rating": 4.5,
        "review_count": 234,
    },
    {
        "product_id": "2",
        "name": "Smart Watch Series 7",
        "description": "Advanced fitness tracking with heart rate monitor and GPS",
        "price": 12999,
        "original_price": 15999,
        "category_id": "1",
        "stock": 8,
        "image_url": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=500",
        "rating": 4.8,
        "review_count": 456,
    },
    {
        "product_id": "3",
        "name": "Premium Laptop Backpack",
        "description": "Water-resistant backpack with padded laptop compartment",
        "price": 1499,
        "original_price": 2499,
        "category_id": "2",
        "stock": 25,
        "image_url": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=500",
        "rating": 4.3,
        "review_count": 128,
    },
    {
        "product_id": "4",
        "name": "Wireless Gaming Mouse",
        "description": "RGB gaming mouse with 16000 DPI and customizable buttons",
        "price": 1899,
        "category_id": "1",
        "stock": 0,
        "image_url": "https://images.unsplash.com/photo-1527814050087-3793815479db?w=500",
        "rating": 4.6,
        "review_count": 89,
    },
    {
        "product_id": "5",
        "name": "Cotton Casual T-Shirt",
        "description": "100% premium cotton, comfortable fit for everyday wear",
        "price": 599,
        "original_price": 999,
        "category_id": "2",
        "stock": 50,
        "image_url": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=500",
        "rating": 4.2,
        "review_count": 312,
    },
    {
        "product_id": "6",
        "name": "Stainless Steel Water Bottle",
        "description": "Insulated bottle keeps drinks cold for 24 hours, hot for 12 hours",
        "price": 799,
        "category_id": "3",
        "stock": 35,
        "image_url": "https://images.unsplash.com/photo-1602143407151-7111542de6e8?w=500",
        "rating": 4.7,
        "review_count": 178,
    },
    {
        "product_id": "7",
        "name": "Mechanical Keyboard RGB",
        "description": "Cherry MX switches with customizable RGB lighting",
        "price": 4999,
        "original_price": 6999,
        "category_id": "1",
        "stock": 12,
        "image_url": "https://images.unsplash.com/photo-1587829741301-dc798b83add3?w=500",
        "rating": 4.9,
        "review_count": 267,
    },
    {
        "product_id": "8",
        "name": "Running Shoes Pro",
        "description": "Lightweight running shoes with advanced cushioning technology",
        "price": 3999,
        "original_price": 5999,
        "category_id": "5",
        "stock": 20,
        "image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=500",
        "rating": 4.4,
        "review_count": 543,
    },
    {
        "product_id": "9",
        "name": "Yoga Mat Premium",
        "description": "Non-slip eco-friendly yoga mat with carrying strap",
        "price": 1299,
        "category_id": "5",
        "stock": 30,
        "image_url": "https://images.unsplash.com/photo-1601925260368-ae2f83cf8b7f?w=500",
        "rating": 4.5,
        "review_count": 198,
    },
    {
        "product_id": "10",
        "name": "Cookbook Collection",
        "description": "Complete collection of Indian and international recipes",
        "price": 899,
        "category_id": "4",
        "stock": 18,
        "image_url": "https://images.unsplash.com/photo-1512820790803-83ca734da794?w=500",
        "rating": 4.6,
        "review_count": 92,
    },
    {
        "product_id": "11",
        "name": "Coffee Maker Deluxe",
        "description": "Programmable coffee maker with thermal carafe",
        "price": 5999,
        "original_price": 7999,
        "category_id": "3",
        "stock": 10,
        "image_url": "https://images.unsplash.com/photo-1517668808822-9ebb02f2a0e6?w=500",
        "rating": 4.3,
        "review_count": 145,
    },
    {
        "product_id": "12",
        "name": "Wireless Earbuds Pro",
        "description": "True wireless earbuds with active noise cancellation",
        "price": 3499,
        "original_price": 4999,
        "category_id": "1",
        "stock": 22,
        "image_url": "https://images.unsplash.com/photo-1590658268037-6bf12165a8df?w=500",
        "rating": 4.7,
        "review_count": 421,
    },
    {
        "product_id": "13",
        "name": "Designer Sunglasses",
        "description": "UV protection polarized lenses with premium frame",
        "price": 2499,
        "category_id": "2",
        "stock": 0,
        "image_url": "https://images.unsplash.com/photo-1572635196237-14b3f281503f?w=500",
        "rating": 4.4,
        "review_count": 167,
    },
    {
        "product_id": "14",
        "name": "Portable Power Bank 20000mAh",
        "description": "Fast charging power bank with dual USB ports",
        "price": 1799,
        "original_price": 2499,
        "category_id": "1",
        "stock": 40,
        "image_url": "https://images.unsplash.com/photo-1609091839311-d5365f9ff1c5?w=500",
        "rating": 4.6,
        "review_count": 289,
    },
    {
        "product_id": "15",
        "name": "Air Fryer 4L",
        "description": "Healthy cooking with 360° air circulation technology",
        "price": 4499,
        "category_id": "3",
        "stock": 15,
        "image_url": "https://images.unsplash.com/photo-1585515320310-259814833d62?w=500",
        "rating": 4.8,
        "review_count": 356,
    },
    {
        "product_id": "16",
        "name": "Denim Jacket Classic",
        "description": "Timeless denim jacket with comfortable fit",
        "price": 2999,
        "original_price": 3999,
        "category_id": "2",
        "stock": 28,
        "image_url": "https://images.unsplash.com/photo-1551028719-00167b16eac5?w=500",
        "rating": 4.5,
        "review_count": 234,
    },
]


def seed_catalogue():
    """Insert the bundled categories and products that are not present yet.

    Must run inside a domain context. Returns the number of products added.
    """
    category_repo = current_domain.repository_for(Category)
    for data in CATEGORIES:
        if category_repo.find_by_slug(data["slug"]) is None:
            current_domain.process(AddCategory(**data), asynchronous=False)

    product_repo = current_domain.repository_for(Product)
    added = 0
    for data in PRODUCTS:
        if product_repo.find(data["product_id"]) is None:
            current_domain.process(AddProduct(**data), asynchronous=False)
            added += 1

    logger.info("catalogue_seeded", categories=len(CATEGORIES), products_added=added)
    return added
