"""
Lambda Handlers for Users Service

サーバレス構成のエントリポイント:
- Users (API Gateway → DynamoDB CRUD)
"""
