"""
docstore - Quick Start Example
Fetch several documents in one round trip
"""

import logging

from docstore import DocStoreClient, MultiGetItem, FetchSourceContext
from docstore.exceptions import DocStoreError

def main():
    """Quick start example"""
    logging.basicConfig(level=logging.DEBUG)
    
    # ============================================
    # STEP 1: Connect
    # ============================================
    # Reads DOCSTORE_URL etc. when no arguments are given
    client = DocStoreClient("http://127.0.0.1:9200")
    
    # ============================================
    # STEP 2: Describe the documents to fetch
    # ============================================
    service = (
        client.multi_get()
        .preference("_local")
        .realtime(True)
        .add(MultiGetItem().index("tweets").doc_type("tweet").id("1"))
        .add(MultiGetItem().index("tweets").doc_type("tweet").id("2").fields("user", "message"))
        .add(
            MultiGetItem()
            .index("users")
            .id("kimchy")
            .fetch_source(FetchSourceContext().exclude("password_hash"))
        )
    )
    
    # ============================================
    # STEP 3: Execute
    # ============================================
    try:
        result = service.execute()
    except DocStoreError as e:
        print(f"❌ Multi-get failed: {e.message} (status: {e.status_code})")
        return
    finally:
        client.close()
    
    for doc in result:
        if doc.found:
            print(f"✅ {doc.index}/{doc.id} (version {doc.version}): {doc.source}")
        else:
            print(f"⚠️  {doc.index}/{doc.id} not found")

if __name__ == "__main__":
    main()
