"""Raw SQL statements. Every value is a bound parameter."""

SELECT_ALL_PRODUCTS_QUERY = "SELECT * FROM products"
SELECT_PRODUCT_BY_ID_QUERY = "SELECT * FROM products WHERE product_id = :product_id"
INSERT_PRODUCT_QUERY = """
    INSERT INTO products (product_id, title, description, price)
    VALUES (:product_id, :title, :description, :price)
"""
DELETE_PRODUCT_QUERY = "DELETE FROM products WHERE product_id = :product_id"

SELECT_ALL_COMMENTS_QUERY = "SELECT * FROM comments"
SELECT_COMMENTS_BY_PRODUCT_QUERY = "SELECT * FROM comments WHERE product_id = :product_id"
DELETE_COMMENTS_BY_PRODUCT_QUERY = "DELETE FROM comments WHERE product_id = :product_id"

SELECT_ALL_IMAGES_QUERY = "SELECT * FROM images"
SELECT_IMAGES_BY_PRODUCT_QUERY = "SELECT * FROM images WHERE product_id = :product_id"
INSERT_PRODUCT_IMAGES_QUERY = """
    INSERT INTO images (image_id, url, product_id, main)
    VALUES (:image_id, :url, :product_id, :main)
"""
DELETE_IMAGES_BY_PRODUCT_QUERY = "DELETE FROM images WHERE product_id = :product_id"
DELETE_IMAGES_QUERY = "DELETE FROM images WHERE image_id IN :image_ids"

SELECT_SIMILAR_PRODUCTS_QUERY = """
    SELECT p.*
    FROM product_similar ps
    JOIN products p ON p.product_id = ps.similar_product_id
    WHERE ps.product_id = :product_id
"""
INSERT_SIMILAR_PRODUCT_QUERY = """
    INSERT INTO product_similar (product_id, similar_product_id)
    VALUES (:product_id, :similar_product_id)
    ON CONFLICT DO NOTHING
"""
DELETE_SIMILAR_PRODUCTS_QUERY = """
    DELETE FROM product_similar
    WHERE product_id = :product_id AND similar_product_id IN :similar_product_ids
"""
SELECT_NOT_SIMILAR_PRODUCTS_QUERY = """
    SELECT p.*
    FROM products p
    LEFT JOIN product_similar ps
        ON ps.product_id = p.product_id AND ps.similar_product_id = :product_id
    WHERE p.product_id != :product_id AND ps.product_id IS NULL
"""
